"""Technical indicators for the Indicator Engine.

All indicators are pure functions: close Series in, Series/DataFrame out.
No state, no side effects, no I/O.
"""

from src.modules.analysis.indicators.momentum import rsi
from src.modules.analysis.indicators.moving_average import ema, seeded_ewm, sma
from src.modules.analysis.indicators.trend import macd
from src.modules.analysis.indicators.volatility import bollinger_bands

__all__ = [
    "sma",
    "ema",
    "seeded_ewm",
    "rsi",
    "macd",
    "bollinger_bands",
]
