"""
Domain models for price data, strategy parameters and simulation results.
"""

from .params import StrategyParameters
from .portfolio import PortfolioState
from .price import PriceSample
from .result import BacktestResult
from .snapshot import Allocation, DailySnapshot

__all__ = [
    "Allocation",
    "BacktestResult",
    "DailySnapshot",
    "PortfolioState",
    "PriceSample",
    "StrategyParameters",
]
