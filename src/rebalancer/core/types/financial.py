"""
Financial data types for backtesting calculations.

Simulation arithmetic runs on plain floats. Prices are whole currency units
(see ``round_price``) while Bitcoin holdings keep full float precision, so
the helpers below only round where a value is presented or compared.
"""

import math

BITCOIN_DECIMALS = 8  # satoshi
PERCENTAGE_DECIMALS = 4

ZERO = 0.0
ONE = 1.0
HUNDRED = 100.0

EQUALITY_TOLERANCE = 1e-9


def to_float(value: str | int | float) -> float:
    """Coerce a JSON/CSV number or numeric string to float."""
    return value if isinstance(value, float) else float(value)


def round_price(price: float) -> float:
    """Round a price to the nearest whole currency unit.

    Halves round up (``round_price(2.5) == 3.0``) rather than to even, so a
    price history rounds the same way regardless of where it was produced.
    """
    return float(math.floor(price + 0.5))


def round_percentage(percentage: float) -> float:
    return round(percentage, PERCENTAGE_DECIMALS)


def percent_to_fraction(percent: float) -> float:
    """Convert a percentage (0-100) to a fraction (0-1)."""
    return percent / HUNDRED


def fraction_to_percent(fraction: float) -> float:
    """Convert a fraction (0-1) to a percentage (0-100)."""
    return fraction * HUNDRED


def safe_float_comparison(a: float, b: float, tolerance: float = EQUALITY_TOLERANCE) -> bool:
    """Check two amounts are equal up to accumulated float error."""
    return abs(a - b) < tolerance


def validate_finite(value: float, operation: str = "calculation") -> float:
    """Return ``value`` unchanged, failing if a calculation produced NaN or infinity.

    Raises:
        CalculationError: If value is NaN or infinite
    """
    from rebalancer.core.exceptions.backtest import CalculationError

    if not math.isfinite(value):
        raise CalculationError(f"Non-finite result {value} in {operation}")
    return value
