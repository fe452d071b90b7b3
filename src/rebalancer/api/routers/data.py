"""
Price data API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from rebalancer.api.dependencies import get_price_source
from rebalancer.api.schemas.api_models import HistoricalData, PriceRangeResponse
from rebalancer.core.enums import Currency
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.infrastructure.data import price_range

router = APIRouter()


@router.get("/history", response_model=HistoricalData)
def get_historical_data(
    source: Annotated[IPriceSource, Depends(get_price_source)],
    currency: Currency = Currency.USD,
    start_date: Annotated[str | None, Query(pattern=r"^\d{4}-\d{2}-\d{2}$")] = None,
    end_date: Annotated[str | None, Query(pattern=r"^\d{4}-\d{2}-\d{2}$")] = None,
) -> HistoricalData:
    """Get daily prices for charting, optionally limited to a date window."""
    samples = source.provide_price_history(currency)
    data = [
        sample.to_dict()
        for sample in samples
        if (start_date is None or sample.date >= start_date)
        and (end_date is None or sample.date <= end_date)
    ]
    return HistoricalData(currency=currency, data=data)


@router.get("/range", response_model=PriceRangeResponse)
def get_price_range(
    source: Annotated[IPriceSource, Depends(get_price_source)],
    currency: Currency = Currency.USD,
) -> PriceRangeResponse:
    """Get the first and last available dates of the price history."""
    available = price_range(source.provide_price_history(currency))
    return PriceRangeResponse(currency=currency, **available.to_dict())
