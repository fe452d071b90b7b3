"""
FastAPI dependencies.
"""

from functools import lru_cache

from rebalancer.config.settings import get_settings
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.infrastructure.data import build_price_source


@lru_cache
def get_price_source() -> IPriceSource:
    """Shared cached price source built from settings."""
    return build_price_source(get_settings(), cache=True)
