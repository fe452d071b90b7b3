"""
Backtest results model.
"""

from dataclasses import dataclass
from typing import Any

from rebalancer.core.types.financial import round_percentage, safe_float_comparison

from .params import StrategyParameters
from .snapshot import DailySnapshot


@dataclass(frozen=True)
class BacktestResult:
    """Results from one rebalancing simulation and its buy-and-hold baseline."""

    params: StrategyParameters
    final_total_value: float
    final_bitcoin_units: float
    final_cash_units: float
    total_rebalance_events: int
    compound_annual_growth_rate_percent: float
    max_drawdown_percent: float
    daily_snapshots: tuple[DailySnapshot, ...]
    buy_and_hold_final_value: float
    buy_and_hold_bitcoin_units: float

    @property
    def total_return_percent(self) -> float:
        """Non-annualized return over the simulated window."""
        return (self.final_total_value / self.params.initial_capital - 1) * 100

    @property
    def rebalance_advantage_percent(self) -> float:
        """Relative outperformance of rebalancing over buy-and-hold, in percent."""
        if self.buy_and_hold_final_value == 0:
            return 0.0
        return (
            (self.final_total_value - self.buy_and_hold_final_value)
            / self.buy_and_hold_final_value
            * 100
        )

    def outperformed_buy_and_hold(self) -> bool:
        """Check if rebalancing ended ahead of buy-and-hold."""
        if safe_float_comparison(self.final_total_value, self.buy_and_hold_final_value):
            return False
        return self.final_total_value > self.buy_and_hold_final_value

    def rebalance_events(self) -> list[DailySnapshot]:
        """Snapshots on which a rebalance happened, in date order."""
        return [snapshot for snapshot in self.daily_snapshots if snapshot.rebalanced]

    @property
    def first_date(self) -> str:
        return self.daily_snapshots[0].date

    @property
    def last_date(self) -> str:
        return self.daily_snapshots[-1].date

    def performance_summary(self) -> dict[str, Any]:
        """Get a summary of key performance metrics."""
        return {
            "initial_capital": self.params.initial_capital,
            "final_total_value": self.final_total_value,
            "total_return_percent": round_percentage(self.total_return_percent),
            "cagr_percent": round_percentage(self.compound_annual_growth_rate_percent),
            "max_drawdown_percent": round_percentage(self.max_drawdown_percent),
            "total_rebalance_events": self.total_rebalance_events,
            "buy_and_hold_final_value": self.buy_and_hold_final_value,
            "rebalance_advantage_percent": round_percentage(self.rebalance_advantage_percent),
            "first_date": self.first_date,
            "last_date": self.last_date,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert results to dictionary."""
        return {
            "params": self.params.to_dict(),
            "final_total_value": self.final_total_value,
            "final_bitcoin_units": self.final_bitcoin_units,
            "final_cash_units": self.final_cash_units,
            "total_rebalance_events": self.total_rebalance_events,
            "compound_annual_growth_rate_percent": self.compound_annual_growth_rate_percent,
            "max_drawdown_percent": self.max_drawdown_percent,
            "buy_and_hold_final_value": self.buy_and_hold_final_value,
            "buy_and_hold_bitcoin_units": self.buy_and_hold_bitcoin_units,
            "rebalance_advantage_percent": self.rebalance_advantage_percent,
            "daily_snapshots": [snapshot.to_dict() for snapshot in self.daily_snapshots],
        }
