"""
Per-day simulation snapshot models.
"""

from dataclasses import dataclass
from typing import Any

from rebalancer.core.enums import RebalanceAction


@dataclass(frozen=True, slots=True)
class Allocation:
    """Bitcoin and cash shares of the portfolio, in percent."""

    bitcoin_percent: float
    cash_percent: float

    @classmethod
    def from_values(cls, bitcoin_value: float, cash_value: float) -> "Allocation":
        """Build an allocation from the value held in each asset."""
        total = bitcoin_value + cash_value
        return cls(
            bitcoin_percent=bitcoin_value / total * 100,
            cash_percent=cash_value / total * 100,
        )

    def to_dict(self) -> dict[str, float]:
        return {"bitcoin_percent": self.bitcoin_percent, "cash_percent": self.cash_percent}


@dataclass(frozen=True, slots=True)
class DailySnapshot:
    """Portfolio state at the close of one simulated day, after any rebalance."""

    date: str
    display_date: str
    price: float
    total_value: float
    bitcoin_value: float
    cash_value: float
    bitcoin_units: float
    allocation: Allocation
    rebalanced: bool = False
    action: RebalanceAction | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert snapshot to dictionary."""
        return {
            "date": self.date,
            "display_date": self.display_date,
            "price": self.price,
            "total_value": self.total_value,
            "bitcoin_value": self.bitcoin_value,
            "cash_value": self.cash_value,
            "bitcoin_units": self.bitcoin_units,
            "allocation": self.allocation.to_dict(),
            "rebalanced": self.rebalanced,
            "action": self.action.value if self.action else None,
        }
