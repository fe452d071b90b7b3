"""
Unit tests for price source combinators and history helpers.
"""

from unittest.mock import Mock

import pytest

from rebalancer.core.enums import Currency
from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models import PriceSample
from rebalancer.infrastructure.data import (
    CachedPriceSource,
    FallbackPriceSource,
    PriceRange,
    price_range,
)


class StaticPriceSource(IPriceSource):
    """In-memory source counting how often it is asked."""

    def __init__(self, samples: list[PriceSample] | None = None, error: Exception | None = None):
        self.samples = samples or []
        self.error = error
        self.calls: list[Currency] = []

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        self.calls.append(currency)
        if self.error is not None:
            raise self.error
        return list(self.samples)


@pytest.fixture
def samples() -> list[PriceSample]:
    return [PriceSample("2020-01-01", 100.0), PriceSample("2020-01-02", 110.0)]


@pytest.fixture
def synthetic_samples() -> list[PriceSample]:
    return [PriceSample("2015-01-01", 300.0)]


class TestFallbackPriceSource:
    """Test suite for FallbackPriceSource."""

    def test_should_use_primary_when_available(
        self, samples: list[PriceSample], synthetic_samples: list[PriceSample]
    ) -> None:
        fallback = StaticPriceSource(synthetic_samples)
        source = FallbackPriceSource(StaticPriceSource(samples), fallback)

        assert source.provide_price_history() == samples
        assert fallback.calls == []

    def test_should_fall_back_on_data_error(self, synthetic_samples: list[PriceSample]) -> None:
        primary = StaticPriceSource(error=DataError("file missing"))
        source = FallbackPriceSource(primary, StaticPriceSource(synthetic_samples))

        assert source.provide_price_history(Currency.THB) == synthetic_samples
        assert primary.calls == [Currency.THB]

    def test_should_fall_back_on_empty_history(
        self, synthetic_samples: list[PriceSample]
    ) -> None:
        source = FallbackPriceSource(StaticPriceSource([]), StaticPriceSource(synthetic_samples))

        assert source.provide_price_history() == synthetic_samples

    def test_should_propagate_other_errors(self, synthetic_samples: list[PriceSample]) -> None:
        primary = StaticPriceSource(error=RuntimeError("bug"))
        source = FallbackPriceSource(primary, StaticPriceSource(synthetic_samples))

        with pytest.raises(RuntimeError, match="bug"):
            source.provide_price_history()

    def test_should_combine_names(self) -> None:
        source = FallbackPriceSource(StaticPriceSource(), StaticPriceSource())

        assert source.name == "StaticPriceSource->StaticPriceSource"


class TestCachedPriceSource:
    """Test suite for CachedPriceSource."""

    def test_should_load_once_per_currency(self, samples: list[PriceSample]) -> None:
        inner = StaticPriceSource(samples)
        source = CachedPriceSource(inner)

        source.provide_price_history()
        source.provide_price_history()
        source.provide_price_history(Currency.THB)

        assert inner.calls == [Currency.USD, Currency.THB]

    def test_should_return_independent_copies(self, samples: list[PriceSample]) -> None:
        source = CachedPriceSource(StaticPriceSource(samples))

        first = source.provide_price_history()
        first.clear()

        assert source.provide_price_history() == samples

    def test_should_reload_after_clear(self, samples: list[PriceSample]) -> None:
        inner = StaticPriceSource(samples)
        source = CachedPriceSource(inner)

        source.provide_price_history()
        source.clear()
        source.provide_price_history()

        assert len(inner.calls) == 2

    def test_should_not_cache_failures(self) -> None:
        inner = Mock(spec=IPriceSource)
        inner.provide_price_history.side_effect = [DataError("down"), []]
        source = CachedPriceSource(inner)

        with pytest.raises(DataError):
            source.provide_price_history()
        assert source.provide_price_history() == []

    def test_should_reject_non_positive_ttl(self, samples: list[PriceSample]) -> None:
        with pytest.raises(ValueError, match="ttl_seconds"):
            CachedPriceSource(StaticPriceSource(samples), ttl_seconds=0)


class TestPriceRange:
    """Test suite for price_range."""

    def test_should_describe_history(self, samples: list[PriceSample]) -> None:
        available = price_range(samples)

        assert available == PriceRange("2020-01-01", "2020-01-02", 2)
        assert available.to_dict() == {
            "earliest_date": "2020-01-01",
            "latest_date": "2020-01-02",
            "sample_count": 2,
        }

    def test_should_not_depend_on_order(self, samples: list[PriceSample]) -> None:
        available = price_range(list(reversed(samples)))

        assert available.earliest_date == "2020-01-01"
        assert available.latest_date == "2020-01-02"

    def test_should_raise_for_empty_history(self) -> None:
        with pytest.raises(DataError, match="No price data available"):
            price_range([])
