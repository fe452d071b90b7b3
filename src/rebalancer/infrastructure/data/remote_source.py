"""
Remote HTTP price source.

Fetches the daily Bitcoin market chart from a CoinGecko-compatible API. The
API key is passed in explicitly; nothing is read from ambient state.
"""

import requests
from loguru import logger

from rebalancer.core.constants import (
    DEFAULT_REMOTE_BASE_URL,
    REMOTE_MAX_RETRIES,
    REMOTE_TIMEOUT_SECONDS,
)
from rebalancer.core.enums import Currency
from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models.price import PriceSample
from rebalancer.core.utils.frames import frame_to_samples

from .price_parsing import parse_price_payload


class RemotePriceSource(IPriceSource):
    """Downloads the full daily price history over HTTP."""

    CHART_PATH = "/coins/bitcoin/market_chart"
    API_KEY_HEADER = "x-cg-demo-api-key"

    def __init__(
        self,
        base_url: str = DEFAULT_REMOTE_BASE_URL,
        api_key: str | None = None,
        session: requests.Session | None = None,
        max_retries: int = REMOTE_MAX_RETRIES,
        timeout: float = REMOTE_TIMEOUT_SECONDS,
    ):
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")

        self.base_url = base_url.rstrip("/")
        self.max_retries = max_retries
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if api_key:
            self.session.headers.update({self.API_KEY_HEADER: api_key})

    def build_url(self) -> str:
        """Build the market chart URL."""
        return f"{self.base_url}{self.CHART_PATH}"

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        params = {"vs_currency": currency.value.lower(), "days": "max", "interval": "daily"}
        payload = self._fetch_json(self.build_url(), params)

        # The API always answers under "prices" whatever the quote currency
        frame = parse_price_payload(payload, Currency.USD)
        logger.info(f"Fetched {len(frame)} {currency} price records from {self.base_url}")
        return frame_to_samples(frame)

    def _fetch_json(self, url: str, params: dict[str, str]) -> object:
        """GET a JSON document with retry logic."""
        for attempt in range(self.max_retries):
            try:
                logger.info(f"Fetching {url} (attempt {attempt + 1}/{self.max_retries})")
                response = self.session.get(url, params=params, timeout=self.timeout)
                response.raise_for_status()
                return response.json()
            except requests.exceptions.JSONDecodeError as e:
                raise DataError(f"Price API returned invalid JSON: {url}") from e
            except requests.exceptions.RequestException as e:
                logger.warning(f"Fetch attempt {attempt + 1} failed: {e}")
                if attempt == self.max_retries - 1:
                    logger.error(f"Failed to fetch {url} after {self.max_retries} attempts")
                    raise DataError(f"Failed to fetch price history from {url}") from e

        raise DataError(f"Failed to fetch price history from {url}")
