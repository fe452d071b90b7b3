"""
Deterministic synthetic price source.

Used when no real price history can be loaded. The same seed and date range
always produce the same series.
"""

import math
from datetime import date, timedelta

import numpy as np
from loguru import logger

from rebalancer.core.constants import (
    DEFAULT_SYNTHETIC_SEED,
    SYNTHETIC_CYCLE_AMPLITUDE,
    SYNTHETIC_GROWTH_BASE,
    SYNTHETIC_NOISE_AMPLITUDE,
    SYNTHETIC_PRICE_FLOOR,
    SYNTHETIC_START_DATE,
    SYNTHETIC_START_PRICE,
)
from rebalancer.core.enums import Currency
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models.price import PriceSample
from rebalancer.core.utils.validation import parse_iso_date, validate_date_range


class SyntheticPriceSource(IPriceSource):
    """
    Generates a Bitcoin-like daily price series.

    Price model per day ``d`` since the start:

    - long-term trend growing by ``SYNTHETIC_GROWTH_BASE`` per year
    - yearly bull/bear cycle of ``±SYNTHETIC_CYCLE_AMPLITUDE``
    - multiplicative random walk with uniform daily shocks of
      ``±SYNTHETIC_NOISE_AMPLITUDE / 2``
    - never below ``SYNTHETIC_PRICE_FLOOR``

    Prices are currency-agnostic; the requested currency only labels logs.
    """

    def __init__(
        self,
        start_date: str = SYNTHETIC_START_DATE,
        end_date: str | None = None,
        seed: int = DEFAULT_SYNTHETIC_SEED,
    ):
        """
        Initialize the generator.

        Args:
            start_date: First generated day (YYYY-MM-DD)
            end_date: Last generated day; defaults to today
            seed: Random seed for the noise component
        """
        end_date = end_date or date.today().isoformat()
        validate_date_range(start_date, end_date)
        self.start_date = start_date
        self.end_date = end_date
        self.seed = seed

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        start = parse_iso_date(self.start_date)
        days = (parse_iso_date(self.end_date) - start).days + 1

        rng = np.random.default_rng(self.seed)
        shocks = 1 + (rng.random(days) - 0.5) * SYNTHETIC_NOISE_AMPLITUDE
        walk = np.cumprod(shocks)

        samples = []
        for day in range(days):
            trend = SYNTHETIC_GROWTH_BASE ** (day / 365)
            cycle = 1 + SYNTHETIC_CYCLE_AMPLITUDE * math.sin((day % 365) / 365 * 2 * math.pi)
            price = SYNTHETIC_START_PRICE * trend * cycle * float(walk[day])
            price = max(price, SYNTHETIC_PRICE_FLOOR)
            samples.append(
                PriceSample(date=(start + timedelta(days=day)).isoformat(), price=price)
            )

        logger.info(
            f"Generated {len(samples)} synthetic {currency} prices "
            f"from {self.start_date} to {self.end_date} (seed={self.seed})"
        )
        return samples
