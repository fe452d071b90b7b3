"""
Parsing of raw price payloads into cleaned DataFrames.

Three payload shapes are accepted, matching the files and APIs price
histories are usually exported from:

- ``{"prices": [[epoch_ms, price], ...]}`` (market-chart APIs)
- ``[{"date": "YYYY-MM-DD", "price": 123.4}, ...]``
- ``[[epoch_ms | "YYYY-MM-DD", "123.4"], ...]`` (exchange candle dumps)

Prices are rounded to whole currency units on load.
"""

from typing import Any

import pandas as pd
from loguru import logger

from rebalancer.core.enums import Currency
from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.utils.frames import round_prices, sort_and_deduplicate


def prices_key(currency: Currency) -> str:
    """Payload key / column holding prices in ``currency``."""
    return "prices" if currency == Currency.USD else f"prices_{currency.value.lower()}"


def parse_price_payload(payload: Any, currency: Currency = Currency.USD) -> pd.DataFrame:
    """Parse a decoded JSON payload into a sorted ``date``/``price`` DataFrame.

    Raises:
        DataError: If the payload shape is not recognised or values are invalid
    """
    if isinstance(payload, dict):
        key = prices_key(currency)
        if not isinstance(payload.get(key), list):
            raise DataError(f"Price payload has no '{key}' list for {currency}")
        frame = _parse_pairs(payload[key])
    elif _is_record_list(payload):
        frame = _parse_records(payload)
    elif _is_pair_list(payload):
        frame = _parse_pairs(payload)
    else:
        logger.error(f"Unknown price data format: {type(payload).__name__}")
        raise DataError("Unexpected price data format")

    frame = frame.dropna(subset=["date", "price"])
    if (frame["price"] < 0).any():
        raise DataError("Price data contains negative prices")

    return round_prices(sort_and_deduplicate(frame))


def _is_record_list(payload: Any) -> bool:
    return (
        isinstance(payload, list)
        and len(payload) > 0
        and isinstance(payload[0], dict)
        and "date" in payload[0]
        and "price" in payload[0]
    )


def _is_pair_list(payload: Any) -> bool:
    return (
        isinstance(payload, list)
        and len(payload) > 0
        and isinstance(payload[0], list | tuple)
        and len(payload[0]) >= 2
    )


def _parse_records(records: list[dict[str, Any]]) -> pd.DataFrame:
    """Parse ``{"date", "price"}`` records."""
    try:
        frame = pd.DataFrame.from_records(records, columns=["date", "price"])
        frame["date"] = _to_iso_dates(frame["date"])
        frame["price"] = pd.to_numeric(frame["price"], errors="raise").astype("float64")
    except (TypeError, ValueError) as e:
        raise DataError(f"Invalid price records: {e}") from e
    return frame


def _parse_pairs(pairs: list[Any]) -> pd.DataFrame:
    """Parse ``[timestamp, price, ...]`` rows; extra columns are ignored."""
    try:
        frame = pd.DataFrame(
            {"date": [row[0] for row in pairs], "price": [row[1] for row in pairs]}
        )
        frame["date"] = _to_iso_dates(frame["date"])
        frame["price"] = pd.to_numeric(frame["price"], errors="raise").astype("float64")
    except (IndexError, TypeError, ValueError) as e:
        raise DataError(f"Invalid price rows: {e}") from e
    return frame


def _to_iso_dates(values: pd.Series) -> pd.Series:
    """Convert epoch milliseconds or date strings to UTC ISO days."""
    if pd.api.types.is_numeric_dtype(values):
        timestamps = pd.to_datetime(values, unit="ms", utc=True)
    else:
        timestamps = pd.to_datetime(values, utc=True, format="mixed")
    return timestamps.dt.strftime("%Y-%m-%d")
