"""Trend indicators: MACD.

Pure functions operating on pandas Series. No state or side effects.
"""

import pandas as pd

from src.modules.analysis.errors import InsufficientDataError, InvalidConfigurationError
from src.modules.analysis.indicators.moving_average import ema, seeded_ewm
from src.modules.analysis.validation import is_valid_period


def macd(
    close: pd.Series,
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> pd.DataFrame:
    """Calculate MACD line, signal line and histogram.

    Formula:
        macd = EMA(fast) - EMA(slow)
        signal = EMA(signal) of macd
        histogram = macd - signal

    Args:
        close: Closing price series.
        fast: Fast EMA period (default 12).
        slow: Slow EMA period (default 26).
        signal: Signal line EMA period (default 9).

    Returns:
        DataFrame with columns `macd`, `signal`, `histogram`, aligned to
        the input index. `macd` is NaN for the first `slow - 1` bars;
        `signal` and `histogram` for the first `slow + signal - 2` bars.

    Raises:
        InvalidConfigurationError: If any period is not an integer >= 1, or
            fast >= slow (an inverted MACD is rejected, not just non-positive
            periods).
        InsufficientDataError: If fewer than `slow + signal` closes.
    """
    if not all(is_valid_period(p) for p in (fast, slow, signal)):
        raise InvalidConfigurationError(
            f"All periods must be integers >= 1, got fast={fast!r}, slow={slow!r}, signal={signal!r}"
        )
    if fast >= slow:
        raise InvalidConfigurationError(
            f"Fast period must be < slow period, got fast={fast}, slow={slow}"
        )
    if len(close) < slow + signal:
        raise InsufficientDataError("MACD", slow + signal, len(close))

    macd_line = ema(close, fast) - ema(close, slow)
    signal_line = seeded_ewm(macd_line, signal, alpha=2.0 / (signal + 1))
    histogram = macd_line - signal_line

    return pd.DataFrame(
        {"macd": macd_line, "signal": signal_line, "histogram": histogram},
        index=close.index,
    )
