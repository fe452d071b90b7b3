"""
Domain exceptions for the rebalancing backtester.
"""

from .backtest import (
    BacktestException,
    CalculationError,
    ConfigurationError,
    DataError,
    InvalidRangeError,
    StaleResultError,
    ValidationError,
)

__all__ = [
    "BacktestException",
    "CalculationError",
    "ConfigurationError",
    "DataError",
    "InvalidRangeError",
    "StaleResultError",
    "ValidationError",
]
