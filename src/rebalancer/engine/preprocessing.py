"""
Price series preparation for the simulation loop.

The engine does not trust callers to pre-sort: every series is sorted and
deduplicated on entry, then cut to the requested window and rounded.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
from loguru import logger

from rebalancer.core.exceptions.backtest import InvalidRangeError
from rebalancer.core.models import PriceSample, StrategyParameters
from rebalancer.core.utils.frames import (
    frame_to_samples,
    round_prices,
    samples_to_frame,
    sort_and_deduplicate,
)

PriceSeries = Iterable[PriceSample | Mapping[str, Any]] | pd.DataFrame


def normalize_price_series(price_series: PriceSeries) -> pd.DataFrame:
    """Sort a price series by date and keep the last sample of each date.

    Args:
        price_series: Samples, ``{"date", "price"}`` mappings or a DataFrame
            with ``date`` and ``price`` columns

    Returns:
        DataFrame with unique ascending dates
    """
    if isinstance(price_series, pd.DataFrame):
        frame = samples_to_frame(price_series[["date", "price"]].to_dict("records"))
    else:
        frame = samples_to_frame(price_series)
    return sort_and_deduplicate(frame)


def select_window(frame: pd.DataFrame, window_start: str, window_end: str) -> pd.DataFrame:
    """Keep the samples dated within ``[window_start, window_end]`` inclusive.

    ISO day strings order lexicographically the same way as chronologically.
    """
    mask = (frame["date"] >= window_start) & (frame["date"] <= window_end)
    return frame[mask].reset_index(drop=True)


def prepare_price_window(
    price_series: PriceSeries, params: StrategyParameters
) -> list[PriceSample]:
    """Produce the rounded, ordered samples a simulation walks over.

    Raises:
        InvalidRangeError: If no sample falls inside the parameter window
    """
    frame = normalize_price_series(price_series)
    window = select_window(frame, params.window_start, params.window_end)

    if window.empty:
        raise InvalidRangeError(params.window_start, params.window_end)

    logger.debug(
        f"Selected {len(window)} of {len(frame)} price samples "
        f"from {params.window_start} to {params.window_end}"
    )
    return frame_to_samples(round_prices(window))
