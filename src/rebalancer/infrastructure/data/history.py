"""
Helpers describing a loaded price history.
"""

from dataclasses import dataclass

from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.models.price import PriceSample


@dataclass(frozen=True)
class PriceRange:
    """First and last available dates of a price history."""

    earliest_date: str
    latest_date: str
    sample_count: int

    def to_dict(self) -> dict[str, str | int]:
        return {
            "earliest_date": self.earliest_date,
            "latest_date": self.latest_date,
            "sample_count": self.sample_count,
        }


def price_range(samples: list[PriceSample]) -> PriceRange:
    """Describe the date span of a history, used as the default window.

    Raises:
        DataError: If the history is empty
    """
    if not samples:
        raise DataError("No price data available")

    dates = [sample.date for sample in samples]
    return PriceRange(earliest_date=min(dates), latest_date=max(dates), sample_count=len(samples))
