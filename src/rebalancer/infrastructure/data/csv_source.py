"""
CSV file price source.
"""

from pathlib import Path

import pandas as pd
from loguru import logger

from rebalancer.core.enums import Currency
from rebalancer.core.exceptions.backtest import DataError
from rebalancer.core.interfaces.price_source import IPriceSource
from rebalancer.core.models.price import PriceSample
from rebalancer.core.utils.frames import frame_to_samples

from .price_parsing import parse_price_payload


class CsvPriceSource(IPriceSource):
    """
    Loads a daily price history from a CSV file.

    Expected columns: ``date`` plus ``price`` (USD) or ``price_<currency>``
    (e.g. ``price_thb``) for other quote currencies.
    """

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    @staticmethod
    def price_column(currency: Currency) -> str:
        """Column holding prices in ``currency``."""
        return "price" if currency == Currency.USD else f"price_{currency.value.lower()}"

    def provide_price_history(self, currency: Currency = Currency.USD) -> list[PriceSample]:
        if not self.file_path.exists():
            raise DataError(f"Price file not found: {self.file_path}")

        column = self.price_column(currency)
        try:
            logger.debug(f"Loading price file: {self.file_path}")
            df = pd.read_csv(self.file_path, dtype={"date": str})
        except pd.errors.EmptyDataError:
            logger.warning(f"Price file is empty: {self.file_path.name}")
            return []
        except OSError as e:
            logger.error(f"File system error loading {self.file_path.name}: {str(e)}")
            raise DataError(f"File system error loading {self.file_path.name}") from e
        except (pd.errors.ParserError, ValueError) as e:
            logger.error(f"CSV parsing error ({type(e).__name__}) in {self.file_path.name}")
            raise DataError(f"Failed to parse CSV file: {self.file_path.name}") from e

        missing = {"date", column} - set(df.columns)
        if missing:
            raise DataError(
                f"CSV file {self.file_path.name} missing columns: {', '.join(sorted(missing))}"
            )

        records = df[["date", column]].rename(columns={column: "price"}).to_dict("records")
        if not records:
            return []

        frame = parse_price_payload(records)
        logger.info(f"Loaded {len(frame)} {currency} price records from {self.file_path.name}")
        return frame_to_samples(frame)
