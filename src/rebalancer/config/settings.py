"""
Settings for the rebalancing backtester.

Loaded from environment variables prefixed with ``REBALANCER_`` and an
optional ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rebalancer.core.constants import (
    DEFAULT_BITCOIN_RATIO,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_INITIAL_CAPITAL,
    DEFAULT_REBALANCE_THRESHOLD,
    DEFAULT_REMOTE_BASE_URL,
    DEFAULT_SYNTHETIC_SEED,
    SYNTHETIC_START_DATE,
)
from rebalancer.core.enums import Currency, PriceSourceKind
from rebalancer.core.exceptions.backtest import ValidationError
from rebalancer.core.utils.validation import validate_iso_date

LOG_LEVELS = ["DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Runtime configuration.

    Attributes:
        initial_capital: Default starting capital for new simulations.
        bitcoin_ratio: Default target Bitcoin allocation, percent.
        rebalance_threshold: Default drift threshold, percent.
        price_source: Which price history provider to use.
        data_path: File read by the json/csv providers.
        remote_base_url: Base URL of the market-chart API.
        api_key: Optional API key sent to the remote provider.
        currency: Quote currency of the price history.
        synthetic_start_date: First day generated by the synthetic provider.
        synthetic_end_date: Last generated day (today when unset).
        synthetic_seed: Seed of the synthetic provider.
        cache_ttl_seconds: How long the API keeps a loaded history.
        debounce_ms: Debounce for interactive callers building a SimulationSession.
        log_level: Minimum loguru level.
        log_json: Emit JSON log records.
    """

    model_config = SettingsConfigDict(
        env_prefix="REBALANCER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    initial_capital: float = Field(DEFAULT_INITIAL_CAPITAL, gt=0)
    bitcoin_ratio: float = Field(DEFAULT_BITCOIN_RATIO, gt=0, lt=100)
    rebalance_threshold: float = Field(DEFAULT_REBALANCE_THRESHOLD, gt=0, le=100)

    price_source: PriceSourceKind = PriceSourceKind.SYNTHETIC
    data_path: Path | None = None
    remote_base_url: str = DEFAULT_REMOTE_BASE_URL
    api_key: SecretStr | None = None
    currency: Currency = Currency.USD

    synthetic_start_date: str = SYNTHETIC_START_DATE
    synthetic_end_date: str | None = None
    synthetic_seed: int = DEFAULT_SYNTHETIC_SEED

    cache_ttl_seconds: float = Field(3600.0, gt=0)
    debounce_ms: int = Field(DEFAULT_DEBOUNCE_MS, ge=0)

    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v}")
        return level

    @field_validator("synthetic_start_date", "synthetic_end_date")
    @classmethod
    def validate_synthetic_dates(cls, v: str | None) -> str | None:
        """Validate synthetic generator dates."""
        if v is None:
            return v
        try:
            return validate_iso_date(v)
        except ValidationError as e:
            raise ValueError(str(e)) from e

    @model_validator(mode="after")
    def validate_data_path(self) -> "Settings":
        """Require a data file for file-based providers."""
        if self.price_source.is_file_based and self.data_path is None:
            raise ValueError(f"data_path is required when price_source is {self.price_source}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()
