"""
Unit tests for the latest-request-wins simulation session.
"""

import asyncio
import threading

import pytest

from rebalancer.core.exceptions.backtest import CalculationError, StaleResultError
from rebalancer.core.models import PriceSample, StrategyParameters
from rebalancer.engine import SimulationSession, simulate


def _params(ratio: float = 50.0, threshold: float = 10.0) -> StrategyParameters:
    return StrategyParameters(
        initial_capital=1000.0,
        target_bitcoin_ratio=ratio,
        rebalance_threshold_percent=threshold,
        window_start="2020-01-01",
        window_end="2020-01-03",
    )


@pytest.fixture
def prices() -> list[PriceSample]:
    return [
        PriceSample("2020-01-01", 100.0),
        PriceSample("2020-01-02", 200.0),
        PriceSample("2020-01-03", 100.0),
    ]


class TestSimulationSessionIds:
    """Request id bookkeeping."""

    def test_should_issue_increasing_ids(self, prices: list[PriceSample]) -> None:
        session = SimulationSession(prices)

        first = session.next_request_id()
        second = session.next_request_id()

        assert second > first
        assert session.latest_request_id == second
        assert session.is_latest(second)
        assert not session.is_latest(first)

    def test_should_commit_only_latest(self, prices: list[PriceSample]) -> None:
        session = SimulationSession(prices)
        result = simulate(prices, _params())
        stale = session.next_request_id()
        current = session.next_request_id()

        assert session.commit(stale, result) is False
        assert session.latest_result is None
        assert session.commit(current, result) is True
        assert session.latest_result is result

    def test_should_not_commit_same_request_twice(self, prices: list[PriceSample]) -> None:
        session = SimulationSession(prices)
        result = simulate(prices, _params())
        request_id = session.next_request_id()

        assert session.commit(request_id, result) is True
        assert session.commit(request_id, result) is False

    def test_should_reject_negative_debounce(self, prices: list[PriceSample]) -> None:
        with pytest.raises(ValueError, match="debounce_ms"):
            SimulationSession(prices, debounce_ms=-1)


class TestSimulationSessionSubmit:
    """Asynchronous submission behaviour."""

    @pytest.mark.asyncio
    async def test_should_return_and_commit_result(self, prices: list[PriceSample]) -> None:
        session = SimulationSession(prices)

        result = await session.submit(_params())

        assert result.total_rebalance_events == 2
        assert session.latest_result is result

    @pytest.mark.asyncio
    async def test_should_discard_superseded_request(self, prices: list[PriceSample]) -> None:
        session = SimulationSession(prices)

        stale, latest = await asyncio.gather(
            session.submit(_params(threshold=10.0)),
            session.submit(_params(threshold=100.0)),
            return_exceptions=True,
        )

        assert isinstance(stale, StaleResultError)
        assert stale.request_id == 1
        assert stale.latest_id == 2
        assert latest.total_rebalance_events == 0
        assert session.latest_result is latest

    @pytest.mark.asyncio
    async def test_should_keep_newer_result_when_older_finishes_last(
        self, prices: list[PriceSample]
    ) -> None:
        release_slow = threading.Event()

        def slow_then_fast(series, params):
            if params.rebalance_threshold_percent == 10.0:
                release_slow.wait(timeout=5)
            return simulate(series, params)

        session = SimulationSession(prices, simulator=slow_then_fast)
        slow_task = asyncio.create_task(session.submit(_params(threshold=10.0)))
        await asyncio.sleep(0)

        fast = await session.submit(_params(threshold=100.0))
        release_slow.set()

        with pytest.raises(StaleResultError):
            await slow_task
        assert session.latest_result is fast

    @pytest.mark.asyncio
    async def test_should_skip_debounced_request_without_running(
        self, prices: list[PriceSample]
    ) -> None:
        calls: list[float] = []

        def counting(series, params):
            calls.append(params.rebalance_threshold_percent)
            return simulate(series, params)

        session = SimulationSession(prices, debounce_ms=20, simulator=counting)

        first, second = await asyncio.gather(
            session.submit(_params(threshold=10.0)),
            session.submit(_params(threshold=20.0)),
            return_exceptions=True,
        )

        assert isinstance(first, StaleResultError)
        assert second.params.rebalance_threshold_percent == 20.0
        assert calls == [20.0]

    @pytest.mark.asyncio
    async def test_should_propagate_failure_of_current_request(
        self, prices: list[PriceSample]
    ) -> None:
        def failing(series, params):
            raise CalculationError("boom")

        session = SimulationSession(prices, simulator=failing)

        with pytest.raises(CalculationError, match="boom"):
            await session.submit(_params())
        assert session.latest_result is None

    @pytest.mark.asyncio
    async def test_should_report_failure_of_superseded_request_as_stale(
        self, prices: list[PriceSample]
    ) -> None:
        release = threading.Event()

        def failing_when_slow(series, params):
            if params.rebalance_threshold_percent == 10.0:
                release.wait(timeout=5)
                raise CalculationError("late failure")
            return simulate(series, params)

        session = SimulationSession(prices, simulator=failing_when_slow)
        slow_task = asyncio.create_task(session.submit(_params(threshold=10.0)))
        await asyncio.sleep(0)

        await session.submit(_params(threshold=100.0))
        release.set()

        with pytest.raises(StaleResultError) as exc_info:
            await slow_task
        assert isinstance(exc_info.value.__cause__, CalculationError)
