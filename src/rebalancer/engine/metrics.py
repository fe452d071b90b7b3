"""
Performance metrics for simulated portfolios.
"""

from dataclasses import dataclass

from rebalancer.core.constants import DAYS_PER_YEAR, MIN_YEARS_FOR_CAGR
from rebalancer.core.exceptions.backtest import CalculationError
from rebalancer.core.types.financial import HUNDRED, ONE, ZERO, validate_finite
from rebalancer.core.utils.validation import parse_iso_date


def years_between(first_date: str, last_date: str) -> float:
    """Elapsed time between two ISO days in years of 365.25 days."""
    return (parse_iso_date(last_date) - parse_iso_date(first_date)).days / DAYS_PER_YEAR


def simple_return_percent(final_value: float, initial_value: float) -> float:
    """Total non-annualized return in percent."""
    return (final_value / initial_value - ONE) * HUNDRED


def compound_annual_growth_rate(
    final_value: float, initial_value: float, first_date: str, last_date: str
) -> float:
    """Calculate CAGR in percent between the first and last simulated days.

    Windows shorter than ``MIN_YEARS_FOR_CAGR`` years are too short to
    annualize and report the simple total return instead.

    Args:
        final_value: Portfolio value on the last day
        initial_value: Capital invested on the first day
        first_date: First simulated ISO day
        last_date: Last simulated ISO day

    Returns:
        Growth rate in percent

    Raises:
        CalculationError: If the result is not finite
    """
    years = years_between(first_date, last_date)

    if years > MIN_YEARS_FOR_CAGR:
        try:
            cagr = ((final_value / initial_value) ** (ONE / years) - ONE) * HUNDRED
        except OverflowError as e:
            raise CalculationError(
                f"CAGR overflows for growth {final_value / initial_value:g}x over {years:.4f} years"
            ) from e
    else:
        cagr = simple_return_percent(final_value, initial_value)

    return validate_finite(cagr, "CAGR")


@dataclass(slots=True)
class DrawdownTracker:
    """Running peak and worst peak-to-trough decline of a value series."""

    peak_value: float
    worst_drawdown: float = ZERO

    def update(self, value: float) -> float:
        """Record one observation and return its drawdown from the peak (0-1)."""
        if value > self.peak_value:
            self.peak_value = value

        drawdown = (self.peak_value - value) / self.peak_value
        if drawdown > self.worst_drawdown:
            self.worst_drawdown = drawdown
        return drawdown

    @property
    def max_drawdown_percent(self) -> float:
        """Largest decline seen so far, in percent."""
        return abs(self.worst_drawdown) * HUNDRED
