"""
Quote currency enumerations.

This module defines the cash currencies price histories can be quoted in.
"""

from enum import StrEnum


class Currency(StrEnum):
    """
    Supported quote currencies for Bitcoin price histories.
    """

    USD = "USD"
    THB = "THB"

    @property
    def symbol(self) -> str:
        """Currency sign used when formatting amounts."""
        return {"USD": "$", "THB": "฿"}[self.value]

    @classmethod
    def from_string(cls, value: str) -> "Currency":
        """
        Convert string to Currency enum, with case-insensitive matching.

        Args:
            value: String representation of the currency

        Returns:
            Corresponding Currency enum value

        Raises:
            ValueError: If currency is not supported
        """
        value_upper = value.strip().upper()
        try:
            return cls(value_upper)
        except ValueError:
            raise ValueError(
                f"Unsupported currency: {value}. "
                f"Supported currencies: {', '.join([c.value for c in cls])}"
            ) from None
