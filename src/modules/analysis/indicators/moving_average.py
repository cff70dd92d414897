"""Moving averages: SMA, EMA, and the SMA-seeded smoothing they share.

Pure functions operating on pandas Series. No state or side effects.
"""

import numpy as np
import pandas as pd

from src.modules.analysis.errors import InsufficientDataError, InvalidConfigurationError
from src.modules.analysis.validation import is_valid_period


def seeded_ewm(series: pd.Series, period: int, alpha: float) -> pd.Series:
    """Exponentially smooth a series, seeded with the SMA of its first window.

    Smoothing starts at the first non-NaN value of `series`. The seed is
    the arithmetic mean of the first `period` valid values and lands on the
    last bar of that window; every later value follows
    `y[i] = alpha * x[i] + (1 - alpha) * y[i - 1]`.

    Used with alpha = 2 / (period + 1) for EMA and alpha = 1 / period for
    Wilder's smoothing (RSI).

    Args:
        series: Input values, optionally with leading NaNs.
        period: Seed window length.
        alpha: Smoothing factor in (0, 1].

    Returns:
        Smoothed series aligned to the input index. Values before the
        seed position are NaN. All NaN if fewer than `period` valid values.
    """
    values = series.to_numpy(dtype=float)
    result = np.full(len(values), np.nan)

    valid = np.flatnonzero(~np.isnan(values))
    if len(valid) < period:
        return pd.Series(result, index=series.index)

    start = valid[0]
    seed_at = start + period - 1

    tail = pd.Series(values[seed_at:])
    tail.iloc[0] = values[start : seed_at + 1].mean()
    result[seed_at:] = tail.ewm(alpha=alpha, adjust=False).mean().to_numpy()

    return pd.Series(result, index=series.index)


def sma(close: pd.Series, period: int) -> pd.Series:
    """Calculate Simple Moving Average.

    Args:
        close: Closing price series.
        period: Window length.

    Returns:
        SMA series. First `period - 1` values are NaN.

    Raises:
        InvalidConfigurationError: If period is not an integer >= 1.
        InsufficientDataError: If the series has fewer than `period` values.
    """
    if not is_valid_period(period):
        raise InvalidConfigurationError(f"Period must be an integer >= 1, got {period!r}")
    if len(close) < period:
        raise InsufficientDataError(f"SMA {period}", period, len(close))

    return close.rolling(window=period, min_periods=period).mean()


def ema(close: pd.Series, period: int) -> pd.Series:
    """Calculate Exponential Moving Average.

    Seeded with SMA(period) over the first `period` closes, then
    smoothed with k = 2 / (period + 1).

    Args:
        close: Closing price series.
        period: EMA period.

    Returns:
        EMA series. First `period - 1` values are NaN.

    Raises:
        InvalidConfigurationError: If period is not an integer >= 1.
        InsufficientDataError: If the series has fewer than `period` values.
    """
    if not is_valid_period(period):
        raise InvalidConfigurationError(f"Period must be an integer >= 1, got {period!r}")
    if len(close) < period:
        raise InsufficientDataError(f"EMA {period}", period, len(close))

    return seeded_ewm(close, period, alpha=2.0 / (period + 1))
