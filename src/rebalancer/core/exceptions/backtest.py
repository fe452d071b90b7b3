"""
Custom exception hierarchy for the rebalancing backtester.

This module defines domain-specific exceptions for better error handling.
"""


class BacktestException(Exception):
    """Base exception for all backtesting-related errors."""

    pass


class ValidationError(BacktestException):
    """Raised when input validation fails."""

    pass


class DataError(BacktestException):
    """Raised when price data access or processing fails."""

    pass


class CalculationError(BacktestException):
    """Raised when mathematical calculations fail."""

    pass


class ConfigurationError(BacktestException):
    """Raised when configuration is invalid."""

    pass


class InvalidRangeError(BacktestException):
    """Raised when no price sample falls inside the requested window."""

    def __init__(self, start_date: str, end_date: str):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(
            f"No price data available in the selected date range: {start_date} to {end_date}"
        )


class StaleResultError(BacktestException):
    """Raised when a simulation request was superseded by a newer one."""

    def __init__(self, request_id: int, latest_id: int):
        self.request_id = request_id
        self.latest_id = latest_id
        super().__init__(
            f"Simulation request {request_id} superseded by request {latest_id}"
        )
