"""
JSON file price source.
"""

import json
from pathlib import Path

from loguru import logger

from rebalancer.core.enums import Currency
from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models.price import PriceSample
from rebalancer.core.utils.frames import frame_to_samples

from .price_parsing import parse_price_payload


class JsonFilePriceSource(IPriceSource):
    """Loads a price history exported as JSON (see ``price_parsing``)."""

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        if not self.file_path.exists():
            raise DataError(f"Price file not found: {self.file_path}")

        try:
            logger.debug(f"Loading price file: {self.file_path}")
            with self.file_path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            logger.error(f"File system error loading {self.file_path.name}: {str(e)}")
            raise DataError(f"File system error loading {self.file_path.name}") from e
        except json.JSONDecodeError as e:
            logger.error(f"JSON parsing error in {self.file_path.name}: {str(e)}")
            raise DataError(f"Invalid JSON in price file: {self.file_path.name}") from e

        frame = parse_price_payload(payload, currency)
        logger.info(f"Loaded {len(frame)} {currency} price records from {self.file_path.name}")
        return frame_to_samples(frame)
