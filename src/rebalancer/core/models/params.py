"""
Strategy parameter model.
"""

from dataclasses import dataclass
from typing import Any

from rebalancer.core.types.financial import percent_to_fraction
from rebalancer.core.utils.validation import (
    parse_iso_date,
    validate_date_range,
    validate_percentage,
    validate_positive,
    validate_ratio_percent,
)


@dataclass(frozen=True)
class StrategyParameters:
    """Configuration for one threshold-rebalancing simulation.

    Percentages are given on a 0-100 scale; ``target_ratio`` and
    ``threshold`` expose them as fractions. Validation runs in
    ``__post_init__`` so an invalid instance can never reach the engine.
    """

    initial_capital: float
    target_bitcoin_ratio: float
    rebalance_threshold_percent: float
    window_start: str
    window_end: str

    def __post_init__(self) -> None:
        validate_positive(self.initial_capital, "initial_capital")
        validate_ratio_percent(self.target_bitcoin_ratio, "target_bitcoin_ratio")
        validate_percentage(self.rebalance_threshold_percent, "rebalance_threshold_percent")
        validate_date_range(self.window_start, self.window_end)

    @property
    def target_ratio(self) -> float:
        """Target Bitcoin share as a fraction."""
        return percent_to_fraction(self.target_bitcoin_ratio)

    @property
    def threshold(self) -> float:
        """Allowed drift from the target as a fraction."""
        return percent_to_fraction(self.rebalance_threshold_percent)

    @property
    def upper_bound(self) -> float:
        """Bitcoin ratio above which the strategy sells."""
        return self.target_ratio + self.threshold

    @property
    def lower_bound(self) -> float:
        """Bitcoin ratio below which the strategy buys."""
        return self.target_ratio - self.threshold

    def duration_days(self) -> int:
        """Calculate length of the requested window in days."""
        return (parse_iso_date(self.window_end) - parse_iso_date(self.window_start)).days

    def to_dict(self) -> dict[str, Any]:
        """Convert parameters to dictionary."""
        return {
            "initial_capital": self.initial_capital,
            "target_bitcoin_ratio": self.target_bitcoin_ratio,
            "rebalance_threshold_percent": self.rebalance_threshold_percent,
            "window_start": self.window_start,
            "window_end": self.window_end,
        }
