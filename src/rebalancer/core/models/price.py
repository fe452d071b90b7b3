"""
Price sample model.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rebalancer.core.exceptions.backtest import ValidationError
from rebalancer.core.types.financial import to_float
from rebalancer.core.utils.validation import validate_iso_date, validate_non_negative


@dataclass(frozen=True, slots=True)
class PriceSample:
    """One daily Bitcoin price quoted in cash units.

    Validated on creation: ``date`` must be YYYY-MM-DD and ``price`` a
    finite non-negative number.
    """

    date: str
    price: float

    def __post_init__(self) -> None:
        validate_iso_date(self.date, "date")
        validate_non_negative(self.price, "price")
        object.__setattr__(self, "price", float(self.price))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PriceSample":
        """Create a sample from a ``{"date": ..., "price": ...}`` mapping.

        Raises:
            ValidationError: If a key is missing or a value is invalid
        """
        try:
            raw_date = data["date"]
            raw_price = data["price"]
        except KeyError as e:
            raise ValidationError(f"Price sample missing field: {e.args[0]}") from e

        try:
            price = to_float(raw_price)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Price must be numeric, got {raw_price!r}") from e

        return cls(date=raw_date, price=price)

    def to_dict(self) -> dict[str, Any]:
        """Convert sample to dictionary."""
        return {"date": self.date, "price": self.price}
