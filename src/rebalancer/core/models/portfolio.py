"""
Two-asset portfolio state.

This module holds the Bitcoin/cash position mutated by the simulation loop.
It is never exposed in results; snapshots copy the values they need.
"""

from dataclasses import dataclass

from rebalancer.core.exceptions.backtest import CalculationError
from rebalancer.core.types.financial import ONE, ZERO, validate_finite


@dataclass(slots=True)
class PortfolioState:
    """Bitcoin units and cash units held by a simulated portfolio."""

    bitcoin_units: float
    cash_units: float

    @classmethod
    def allocate(cls, capital: float, target_ratio: float, price: float) -> "PortfolioState":
        """Split capital between Bitcoin and cash at the target ratio.

        Args:
            capital: Cash available to invest
            target_ratio: Bitcoin share as a fraction (0-1)
            price: Bitcoin price used to buy the Bitcoin leg

        Raises:
            CalculationError: If price is not positive
        """
        if price <= ZERO:
            raise CalculationError(f"Cannot buy Bitcoin at non-positive price {price}")
        return cls(
            bitcoin_units=(capital * target_ratio) / price,
            cash_units=capital * (ONE - target_ratio),
        )

    def bitcoin_value(self, price: float) -> float:
        """Value of the Bitcoin leg at the given price."""
        return self.bitcoin_units * price

    def total_value(self, price: float) -> float:
        """Value of Bitcoin plus cash at the given price."""
        return self.bitcoin_value(price) + self.cash_units

    def bitcoin_ratio(self, price: float) -> float:
        """Bitcoin share of the total value as a fraction.

        Raises:
            CalculationError: If the portfolio is worth nothing
        """
        total = self.total_value(price)
        if total <= ZERO:
            raise CalculationError(f"Portfolio value is {total}; allocation undefined")
        return validate_finite(self.bitcoin_value(price) / total, "allocation ratio")

    def rebalance_to(self, total_value: float, target_ratio: float, price: float) -> None:
        """Reset holdings so Bitcoin is exactly ``target_ratio`` of ``total_value``.

        Raises:
            CalculationError: If price is not positive
        """
        if price <= ZERO:
            raise CalculationError(f"Cannot rebalance at non-positive price {price}")
        self.bitcoin_units = (total_value * target_ratio) / price
        self.cash_units = total_value * (ONE - target_ratio)
