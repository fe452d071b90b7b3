"""
Backtest API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from loguru import logger

from rebalancer.api.dependencies import get_price_source
from rebalancer.api.schemas.api_models import BacktestRequest, BacktestResponse
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models import StrategyParameters
from rebalancer.engine import simulate
from rebalancer.infrastructure.data import price_range

router = APIRouter()


@router.post("/", response_model=BacktestResponse)
def run_backtest(
    request: BacktestRequest,
    source: Annotated[IPriceSource, Depends(get_price_source)],
) -> BacktestResponse:
    """Run a rebalancing backtest against the configured price history."""
    samples = source.provide_price_history(request.currency)
    available = price_range(samples)

    params = StrategyParameters(
        initial_capital=request.initial_capital,
        target_bitcoin_ratio=request.bitcoin_ratio,
        rebalance_threshold_percent=request.rebalance_threshold,
        window_start=(
            request.start_date.isoformat() if request.start_date else available.earliest_date
        ),
        window_end=request.end_date.isoformat() if request.end_date else available.latest_date,
    )
    logger.info(f"Running backtest with parameters: {params.to_dict()}")

    result = simulate(samples, params)
    logger.info(f"Backtest finished: {result.performance_summary()}")
    payload = result.to_dict()
    if not request.include_snapshots:
        payload["daily_snapshots"] = []
    return BacktestResponse.model_validate(payload)
