"""Indicator Engine — technical indicators and signals over OHLCV series.

Computes SMA, EMA, RSI, MACD and Bollinger Bands for one price series
and classifies each reading into a buy/sell/neutral signal.
"""

from src.modules.analysis.engine import IndicatorEngine, compute_indicators
from src.modules.analysis.errors import (
    IndicatorError,
    InsufficientDataError,
    InvalidConfigurationError,
    InvalidSeriesError,
)
from src.modules.analysis.types import (
    BollingerConfig,
    BollingerIndicators,
    Indicator,
    IndicatorBundle,
    IndicatorConfig,
    MACDConfig,
    MACDIndicators,
    PriceBar,
)

__all__ = [
    "IndicatorEngine",
    "compute_indicators",
    "IndicatorError",
    "InsufficientDataError",
    "InvalidConfigurationError",
    "InvalidSeriesError",
    "BollingerConfig",
    "BollingerIndicators",
    "Indicator",
    "IndicatorBundle",
    "IndicatorConfig",
    "MACDConfig",
    "MACDIndicators",
    "PriceBar",
]
