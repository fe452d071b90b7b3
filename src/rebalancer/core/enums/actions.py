"""
Rebalance action enumerations.

This module defines the trades a rebalance can perform on the Bitcoin leg.
"""

from enum import StrEnum


class RebalanceAction(StrEnum):
    """
    Allowed rebalance actions.

    BUY restores the target after Bitcoin fell below the lower bound,
    SELL after it rose above the upper bound.
    """

    BUY = "BUY"
    SELL = "SELL"

    @property
    def is_buy(self) -> bool:
        """Check if action buys Bitcoin."""
        return self == self.BUY

    @classmethod
    def for_ratio(
        cls, current_ratio: float, lower_bound: float, upper_bound: float
    ) -> "RebalanceAction | None":
        """
        Determine the action required for the current Bitcoin ratio.

        Bounds are exclusive: a ratio sitting exactly on a bound does not trigger.

        Args:
            current_ratio: Current Bitcoin share of the portfolio (0-1)
            lower_bound: Target ratio minus threshold
            upper_bound: Target ratio plus threshold

        Returns:
            SELL above the upper bound, BUY below the lower bound, otherwise None
        """
        if current_ratio > upper_bound:
            return cls.SELL
        if current_ratio < lower_bound:
            return cls.BUY
        return None
