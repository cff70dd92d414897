"""Tests for configuration loader."""

from unittest.mock import patch

import pytest

from src.modules.analysis.errors import InvalidConfigurationError
from src.shared.config import load_config


class TestLoadConfig:
    """Tests for load_config function."""

    @patch.dict("os.environ", {}, clear=True)
    def test_load_config_defaults(self) -> None:
        """Test default configuration values."""
        config = load_config()

        assert config.environment == "dev"
        assert config.log_level == "INFO"
        assert config.history_years == 2
        assert config.sma_periods == (20, 50, 150, 200)
        assert config.ema_period == 20
        assert config.rsi_period == 14

    @patch.dict(
        "os.environ",
        {
            "ENVIRONMENT": "prod",
            "LOG_LEVEL": "debug",
            "HISTORY_YEARS": "5",
            "SMA_PERIODS": "10, 30,100",
            "EMA_PERIOD": "12",
            "RSI_PERIOD": "9",
        },
        clear=True,
    )
    def test_load_config_explicit_overrides(self) -> None:
        """Test explicit environment variables override defaults."""
        config = load_config()

        assert config.environment == "prod"
        assert config.log_level == "DEBUG"
        assert config.history_years == 5
        assert config.sma_periods == (10, 30, 100)
        assert config.ema_period == 12
        assert config.rsi_period == 9

    @patch.dict("os.environ", {"SMA_PERIODS": "", "RSI_PERIOD": " "}, clear=True)
    def test_blank_values_use_defaults(self) -> None:
        """Blank environment variables fall back to defaults."""
        config = load_config()

        assert config.sma_periods == (20, 50, 150, 200)
        assert config.rsi_period == 14

    @patch.dict("os.environ", {"RSI_PERIOD": "fourteen"}, clear=True)
    def test_malformed_integer(self) -> None:
        """Non-integer values raise ValueError naming the variable."""
        with pytest.raises(ValueError, match="RSI_PERIOD"):
            load_config()

    @patch.dict("os.environ", {"SMA_PERIODS": "20,fifty"}, clear=True)
    def test_malformed_integer_list(self) -> None:
        """Non-integer list entries raise ValueError naming the variable."""
        with pytest.raises(ValueError, match="SMA_PERIODS"):
            load_config()


class TestIndicatorConfig:
    """Tests for Config.indicator_config()."""

    @patch.dict("os.environ", {"SMA_PERIODS": "50,20", "EMA_PERIOD": "9"}, clear=True)
    def test_indicator_config_from_env(self) -> None:
        """Environment periods flow into the engine configuration."""
        indicator_config = load_config().indicator_config()

        assert indicator_config.sma_periods == (20, 50)
        assert indicator_config.ema_period == 9
        assert indicator_config.rsi_period == 14
        assert indicator_config.macd.slow == 26

    @patch.dict("os.environ", {"EMA_PERIOD": "0"}, clear=True)
    def test_indicator_config_rejects_bad_period(self) -> None:
        """Non-positive periods are rejected when building the engine config."""
        config = load_config()
        with pytest.raises(InvalidConfigurationError, match="EMA period"):
            config.indicator_config()
