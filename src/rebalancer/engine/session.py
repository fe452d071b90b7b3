"""
Latest-request-wins coordination for repeated simulations.

A presentation layer re-runs the engine whenever parameters change. Each
submission gets a monotonically increasing request id; a result is committed
only if no newer request was issued while it was running, so a slow stale
run can never overwrite a result computed from newer parameters.
"""

import asyncio
import itertools
from collections.abc import Callable

from loguru import logger

from rebalancer.core.exceptions.backtest import BacktestException, StaleResultError
from rebalancer.core.models import BacktestResult, PriceSample, StrategyParameters

from .preprocessing import PriceSeries
from .simulator import simulate

Simulator = Callable[[PriceSeries, StrategyParameters], BacktestResult]


class SimulationSession:
    """Runs simulations over one price history and keeps the latest result.

    Library entry point for interactive callers (UIs, notebooks) that re-run
    the backtest on every parameter change; the CLI and HTTP API each run a
    single request and call ``simulate`` directly.
    """

    def __init__(
        self,
        price_series: list[PriceSample],
        debounce_ms: int = 0,
        simulator: Simulator = simulate,
    ) -> None:
        """
        Initialize the session.

        Args:
            price_series: Price history shared by every request
            debounce_ms: Delay before a request starts; superseded requests
                are dropped without running
            simulator: Engine entry point
        """
        if debounce_ms < 0:
            raise ValueError("debounce_ms must be non-negative")

        self._price_series = list(price_series)
        self._debounce_seconds = debounce_ms / 1000
        self._simulator = simulator
        self._sequence = itertools.count(1)
        self._latest_request_id = 0
        self._committed_request_id = 0
        self._latest_result: BacktestResult | None = None

    @property
    def latest_result(self) -> BacktestResult | None:
        """Most recently committed result, if any."""
        return self._latest_result

    @property
    def latest_request_id(self) -> int:
        return self._latest_request_id

    def next_request_id(self) -> int:
        """Issue a new request id; it supersedes every earlier one."""
        self._latest_request_id = next(self._sequence)
        return self._latest_request_id

    def is_latest(self, request_id: int) -> bool:
        """Check whether a request is still the newest issued."""
        return request_id == self._latest_request_id

    def commit(self, request_id: int, result: BacktestResult) -> bool:
        """Store a result if its request has not been superseded.

        Returns:
            True if the result became the live result
        """
        if not self.is_latest(request_id) or request_id <= self._committed_request_id:
            logger.debug(
                f"Discarding stale result for request {request_id} "
                f"(latest {self._latest_request_id})"
            )
            return False

        self._committed_request_id = request_id
        self._latest_result = result
        return True

    async def submit(self, params: StrategyParameters) -> BacktestResult:
        """Run a simulation off the event loop and commit it if still current.

        Raises:
            StaleResultError: If a newer request was submitted meanwhile
            BacktestException: If the current request's simulation fails
        """
        request_id = self.next_request_id()

        if self._debounce_seconds:
            await asyncio.sleep(self._debounce_seconds)
            if not self.is_latest(request_id):
                raise StaleResultError(request_id, self._latest_request_id)

        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(
                None, self._simulator, self._price_series, params
            )
        except BacktestException as e:
            if not self.is_latest(request_id):
                raise StaleResultError(request_id, self._latest_request_id) from e
            raise

        if not self.commit(request_id, result):
            raise StaleResultError(request_id, self._latest_request_id)
        return result
