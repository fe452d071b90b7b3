"""
Price source combinators: fallback and caching.
"""

from threading import RLock

from cachetools import TTLCache
from loguru import logger

from rebalancer.core.enums import Currency
from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models.price import PriceSample


class FallbackPriceSource(IPriceSource):
    """Uses the primary source, switching to the fallback when it fails or is empty."""

    def __init__(self, primary: IPriceSource, fallback: IPriceSource):
        self.primary = primary
        self.fallback = fallback

    @property
    def name(self) -> str:
        return f"{self.primary.name}->{self.fallback.name}"

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        try:
            samples = self.primary.provide_price_history(currency)
        except DataError as e:
            logger.warning(
                f"{self.primary.name} failed ({e}); using {self.fallback.name} instead"
            )
            return self.fallback.provide_price_history(currency)

        if not samples:
            logger.warning(f"{self.primary.name} returned no prices; using {self.fallback.name}")
            return self.fallback.provide_price_history(currency)

        return samples


class CachedPriceSource(IPriceSource):
    """Keeps loaded histories per currency for a limited time."""

    DEFAULT_TTL_SECONDS = 3600

    def __init__(self, source: IPriceSource, ttl_seconds: float = DEFAULT_TTL_SECONDS):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self.source = source
        self._cache: TTLCache[Currency, list[PriceSample]] = TTLCache(maxsize=8, ttl=ttl_seconds)
        self._lock = RLock()

    @property
    def name(self) -> str:
        return f"Cached({self.source.name})"

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        with self._lock:
            cached = self._cache.get(currency)
            if cached is not None:
                logger.debug(f"Price history cache hit for {currency}")
                return list(cached)

            samples = self.source.provide_price_history(currency)
            self._cache[currency] = list(samples)
            return list(samples)

    def clear(self) -> None:
        """Drop every cached history."""
        with self._lock:
            self._cache.clear()
