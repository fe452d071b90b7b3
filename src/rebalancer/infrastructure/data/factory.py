"""
Construction of price sources from settings.
"""

from loguru import logger

from rebalancer.config.settings import Settings
from rebalancer.core.enums import PriceSourceKind
from rebalancer.core.exceptions.backtest import ConfigurationError
from rebalancer.core.interfaces.price_source import IPriceSource

from .csv_source import CsvPriceSource
from .fallback_source import CachedPriceSource, FallbackPriceSource
from .json_source import JsonFilePriceSource
from .remote_source import RemotePriceSource
from .synthetic_source import SyntheticPriceSource


def build_price_source(settings: Settings, cache: bool = False) -> IPriceSource:
    """Create the configured price source.

    Real sources fall back to the synthetic generator when they fail, so a
    missing file or an unreachable API still yields a usable history.

    Raises:
        ConfigurationError: If a file-based source has no data path
    """
    synthetic = SyntheticPriceSource(
        start_date=settings.synthetic_start_date,
        end_date=settings.synthetic_end_date,
        seed=settings.synthetic_seed,
    )

    source: IPriceSource
    match settings.price_source:
        case PriceSourceKind.SYNTHETIC:
            source = synthetic
        case PriceSourceKind.JSON | PriceSourceKind.CSV:
            if settings.data_path is None:
                raise ConfigurationError(
                    f"data_path is required for the {settings.price_source} price source"
                )
            file_source: IPriceSource = (
                JsonFilePriceSource(settings.data_path)
                if settings.price_source == PriceSourceKind.JSON
                else CsvPriceSource(settings.data_path)
            )
            source = FallbackPriceSource(file_source, synthetic)
        case PriceSourceKind.REMOTE:
            remote = RemotePriceSource(
                base_url=settings.remote_base_url,
                api_key=settings.api_key.get_secret_value() if settings.api_key else None,
            )
            source = FallbackPriceSource(remote, synthetic)
        case _:
            raise ConfigurationError(f"Unsupported price source: {settings.price_source}")

    if cache:
        source = CachedPriceSource(source, ttl_seconds=settings.cache_ttl_seconds)

    logger.debug(f"Using price source {source.name}")
    return source
