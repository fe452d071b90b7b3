"""
Price history access interface.
"""

from abc import ABC, abstractmethod

from rebalancer.core.enums import Currency
from rebalancer.core.models.price import PriceSample


class IPriceSource(ABC):
    """Abstract interface for daily Bitcoin price history providers."""

    @abstractmethod
    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        """Load the full daily price history quoted in ``currency``.

        Returns:
            Samples in ascending date order with unique dates

        Raises:
            DataError: If the history cannot be loaded
        """
        pass

    @property
    def name(self) -> str:
        """Human-readable source name used in log messages."""
        return type(self).__name__
