"""Configuration loader for the indicator engine.

Loads configuration from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass

from src.modules.analysis.types import DEFAULT_SMA_PERIODS, IndicatorConfig


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Attributes:
        environment: Current environment (dev/prod).
        log_level: Logging level name.
        history_years: Years of daily bars the CLI fetches per symbol.
        sma_periods: SMA periods to compute.
        ema_period: EMA period.
        rsi_period: RSI lookback.
    """

    environment: str
    log_level: str
    history_years: int
    sma_periods: tuple[int, ...]
    ema_period: int
    rsi_period: int

    def indicator_config(self) -> IndicatorConfig:
        """Build the engine configuration from these settings.

        Raises:
            InvalidConfigurationError: If any configured period is < 1.
        """
        return IndicatorConfig(
            sma_periods=self.sma_periods,
            ema_period=self.ema_period,
            rsi_period=self.rsi_period,
        )


def load_config() -> Config:
    """Load configuration from environment variables.

    Returns:
        Config object with all settings.

    Raises:
        ValueError: If a numeric environment variable is malformed.
    """
    return Config(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        history_years=_get_int("HISTORY_YEARS", 2),
        sma_periods=_get_int_tuple("SMA_PERIODS", DEFAULT_SMA_PERIODS),
        ema_period=_get_int("EMA_PERIOD", 20),
        rsi_period=_get_int("RSI_PERIOD", 14),
    )


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _get_int_tuple(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a comma-separated list of integers, got {raw!r}") from e
