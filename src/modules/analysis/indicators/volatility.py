"""Volatility indicators: Bollinger Bands.

Pure functions operating on pandas Series. No state or side effects.
"""

import pandas as pd

from src.modules.analysis.errors import InsufficientDataError, InvalidConfigurationError
from src.modules.analysis.validation import is_valid_multiplier, is_valid_period


def bollinger_bands(
    close: pd.Series,
    period: int = 20,
    std_dev_multiplier: float = 2.0,
) -> pd.DataFrame:
    """Calculate Bollinger Bands.

    The middle band is SMA(period). Upper and lower bands sit
    `std_dev_multiplier` population standard deviations (ddof=0)
    of the same window above and below it.

    Args:
        close: Closing price series.
        period: Window length (default 20).
        std_dev_multiplier: Band width in standard deviations (default 2).

    Returns:
        DataFrame with columns `upper`, `middle`, `lower`.
        First `period - 1` rows are NaN.

    Raises:
        InvalidConfigurationError: If period is not an integer >= 1, or the
            multiplier is not a finite number > 0.
        InsufficientDataError: If fewer than `period` closes.
    """
    if not is_valid_period(period):
        raise InvalidConfigurationError(f"Period must be an integer >= 1, got {period!r}")
    if not is_valid_multiplier(std_dev_multiplier):
        raise InvalidConfigurationError(
            f"Standard deviation multiplier must be finite and > 0, got {std_dev_multiplier!r}"
        )
    if len(close) < period:
        raise InsufficientDataError("Bollinger Bands", period, len(close))

    window = close.rolling(window=period, min_periods=period)
    middle = window.mean()
    width = std_dev_multiplier * window.std(ddof=0)

    return pd.DataFrame(
        {"upper": middle + width, "middle": middle, "lower": middle - width},
        index=close.index,
    )
