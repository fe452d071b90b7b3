"""
Display formatting helpers for simulation results.

These mirror the formats shown on summary cards and chart tooltips:
currency with two decimals, percentages with two decimals, Bitcoin amounts
with two to eight decimals and month-year chart labels.
"""

from datetime import datetime

from rebalancer.core.constants import DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT
from rebalancer.core.enums import Currency
from rebalancer.core.types.financial import BITCOIN_DECIMALS


def format_currency(value: float, currency: Currency = Currency.USD) -> str:
    """Format an amount of cash, e.g. ``$12,345.60`` or ``-$10.00``."""
    sign = "-" if value < 0 else ""
    return f"{sign}{currency.symbol}{abs(value):,.2f}"


def format_percentage(value: float) -> str:
    """Format a percentage value (already scaled to 0-100), e.g. ``12.34%``."""
    return f"{value:,.2f}%"


def format_bitcoin(value: float) -> str:
    """Format a Bitcoin amount with between 2 and 8 decimal places.

    Examples:
        >>> format_bitcoin(1.5)
        '1.50'
        >>> format_bitcoin(0.123456789)
        '0.12345679'
    """
    text = f"{value:,.{BITCOIN_DECIMALS}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) < 2:
        fraction = fraction.ljust(2, "0")
    return f"{whole}.{fraction}"


def format_display_date(iso_date: str) -> str:
    """Format an ISO day as a month-year chart label, e.g. ``Jan 2020``."""
    return datetime.strptime(iso_date, ISO_DATE_FORMAT).strftime(DISPLAY_DATE_FORMAT)
