"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    BITCOIN_DECIMALS,
    HUNDRED,
    ONE,
    PERCENTAGE_DECIMALS,
    ZERO,
    fraction_to_percent,
    percent_to_fraction,
    round_percentage,
    round_price,
    safe_float_comparison,
    to_float,
    validate_finite,
)

__all__ = [
    # Utility functions
    "to_float",
    "round_price",
    "round_percentage",
    "percent_to_fraction",
    "fraction_to_percent",
    "safe_float_comparison",
    "validate_finite",
    # Constants
    "BITCOIN_DECIMALS",
    "PERCENTAGE_DECIMALS",
    "ZERO",
    "ONE",
    "HUNDRED",
]
