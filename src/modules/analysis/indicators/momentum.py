"""Momentum indicators: RSI.

Pure functions operating on pandas Series. No state or side effects.
"""

import pandas as pd

from src.modules.analysis.errors import InsufficientDataError, InvalidConfigurationError
from src.modules.analysis.validation import is_valid_period
from src.modules.analysis.indicators.moving_average import seeded_ewm


def rsi(close: pd.Series, period: int = 14) -> pd.Series:
    """Calculate Relative Strength Index (Wilder's smoothing).

    Average gain and loss are seeded with the mean of the first `period`
    deltas, then smoothed as (prev * (period - 1) + current) / period.

    Args:
        close: Closing price series.
        period: Lookback period (default 14).

    Returns:
        RSI values between 0 and 100. First `period` values are NaN.
        Where average loss is 0 the RSI saturates at 100.

    Raises:
        InvalidConfigurationError: If period is not an integer >= 1.
        InsufficientDataError: If fewer than `period + 1` closes.
    """
    if not is_valid_period(period):
        raise InvalidConfigurationError(f"Period must be an integer >= 1, got {period!r}")
    if len(close) < period + 1:
        raise InsufficientDataError("RSI", period + 1, len(close))

    delta = close.diff()
    gains = delta.clip(lower=0.0)
    losses = (-delta).clip(lower=0.0)

    alpha = 1.0 / period
    avg_gain = seeded_ewm(gains, period, alpha)
    avg_loss = seeded_ewm(losses, period, alpha)

    rs = avg_gain / avg_loss
    result = 100.0 - (100.0 / (1.0 + rs))

    # No losses in the window: all gains (or flat), RSI = 100
    result = result.where(avg_loss != 0, 100.0)

    return result
