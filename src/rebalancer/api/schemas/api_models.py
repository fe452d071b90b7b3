"""
Pydantic schemas for API request/response models.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from rebalancer.core.constants import (
    DEFAULT_BITCOIN_RATIO,
    DEFAULT_INITIAL_CAPITAL,
    DEFAULT_REBALANCE_THRESHOLD,
)
from rebalancer.core.enums import Currency, RebalanceAction


class BacktestRequest(BaseModel):
    """Request model for running a backtest.

    Omitted window dates default to the first/last day of the price history.
    """

    initial_capital: float = Field(
        default=DEFAULT_INITIAL_CAPITAL, gt=0, description="Starting capital"
    )
    bitcoin_ratio: float = Field(
        default=DEFAULT_BITCOIN_RATIO, gt=0, lt=100, description="Target Bitcoin allocation (%)"
    )
    rebalance_threshold: float = Field(
        default=DEFAULT_REBALANCE_THRESHOLD,
        gt=0,
        le=100,
        description="Allowed drift before rebalancing (%)",
    )
    start_date: date | None = Field(default=None, description="First day of the window")
    end_date: date | None = Field(default=None, description="Last day of the window")
    currency: Currency = Field(default=Currency.USD, description="Quote currency")
    include_snapshots: bool = Field(default=True, description="Return the daily series")

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, v: date | None, info) -> date | None:
        """Validate that end_date is not before start_date."""
        start = info.data.get("start_date")
        if v is not None and start is not None and v < start:
            raise ValueError("end_date must be on or after start_date")
        return v


class AllocationModel(BaseModel):
    bitcoin_percent: float
    cash_percent: float


class DailySnapshotModel(BaseModel):
    """One simulated day."""

    date: str
    display_date: str
    price: float
    total_value: float
    bitcoin_value: float
    cash_value: float
    bitcoin_units: float
    allocation: AllocationModel
    rebalanced: bool
    action: RebalanceAction | None = None


class BacktestResponse(BaseModel):
    """Response model for backtest results."""

    params: dict[str, Any]
    final_total_value: float
    final_bitcoin_units: float
    final_cash_units: float
    total_rebalance_events: int
    compound_annual_growth_rate_percent: float
    max_drawdown_percent: float
    buy_and_hold_final_value: float
    buy_and_hold_bitcoin_units: float
    rebalance_advantage_percent: float
    daily_snapshots: list[DailySnapshotModel] = Field(default_factory=list)


class PriceRangeResponse(BaseModel):
    """Response model for the available price history span."""

    currency: Currency
    earliest_date: str
    latest_date: str
    sample_count: int


class HistoricalData(BaseModel):
    """Response model for historical prices."""

    currency: Currency
    data: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    """Response model for errors."""

    error: str
    message: str
    details: dict | None = None
