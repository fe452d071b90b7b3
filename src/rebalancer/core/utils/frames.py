"""
Conversions between price samples and pandas DataFrames.

Price histories are cleaned as DataFrames with ``date`` (ISO string) and
``price`` (float64) columns and handed to the engine as ``PriceSample`` lists.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
from loguru import logger

from rebalancer.core.models.price import PriceSample
from rebalancer.core.types.financial import round_price

PRICE_COLUMNS = ["date", "price"]


def samples_to_frame(samples: Iterable[PriceSample | Mapping[str, Any]]) -> pd.DataFrame:
    """Build a ``date``/``price`` DataFrame preserving input order.

    Mappings are validated through ``PriceSample.from_mapping``.
    """
    rows = [
        sample if isinstance(sample, PriceSample) else PriceSample.from_mapping(sample)
        for sample in samples
    ]
    if not rows:
        return pd.DataFrame({"date": pd.Series(dtype=str), "price": pd.Series(dtype="float64")})
    return pd.DataFrame(
        {
            "date": [row.date for row in rows],
            "price": pd.Series([row.price for row in rows], dtype="float64"),
        }
    )


def frame_to_samples(frame: pd.DataFrame) -> list[PriceSample]:
    """Convert a ``date``/``price`` DataFrame into validated price samples."""
    return [
        PriceSample(date=str(date), price=float(price))
        for date, price in zip(frame["date"], frame["price"], strict=True)
    ]


def sort_and_deduplicate(frame: pd.DataFrame) -> pd.DataFrame:
    """Sort by date and drop duplicate dates, keeping the last occurrence.

    The sort is stable so equal dates keep their input order before
    deduplication.
    """
    duplicate_mask = frame["date"].duplicated(keep="last")
    if duplicate_mask.any():
        logger.warning(f"Removing {int(duplicate_mask.sum())} duplicate price dates")
        frame = frame[~duplicate_mask]

    return frame.sort_values("date", kind="stable").reset_index(drop=True)


def round_prices(frame: pd.DataFrame) -> pd.DataFrame:
    """Round every price to the nearest whole currency unit."""
    rounded = frame.copy()
    rounded["price"] = rounded["price"].map(round_price).astype("float64")
    return rounded
