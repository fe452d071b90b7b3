"""
Price data infrastructure.

This module provides interchangeable price history sources: local files,
a remote API, a deterministic synthetic generator and combinators for
fallback and caching.
"""

from .csv_source import CsvPriceSource
from .factory import build_price_source
from .fallback_source import CachedPriceSource, FallbackPriceSource
from .history import PriceRange, price_range
from .json_source import JsonFilePriceSource
from .remote_source import RemotePriceSource
from .synthetic_source import SyntheticPriceSource

__all__ = [
    "CachedPriceSource",
    "CsvPriceSource",
    "FallbackPriceSource",
    "JsonFilePriceSource",
    "PriceRange",
    "RemotePriceSource",
    "SyntheticPriceSource",
    "build_price_source",
    "price_range",
]
