"""Shared fixtures for indicator engine tests.

All data is static and deterministic. No network calls, no randomness.
"""

from collections.abc import Callable, Sequence
from datetime import date

import pandas as pd
import pytest


def _make_timestamps(n: int) -> pd.Index:
    """Epoch-millisecond timestamps for n business days."""
    start = date(2024, 1, 2)  # A Tuesday
    dates = pd.bdate_range(start=start, periods=n)
    return pd.Index(dates.as_unit("ms").asi8, name="timestamp")


def _frame_from_closes(closes: Sequence[float]) -> pd.DataFrame:
    """OHLCV frame around a close series with typical daily ranges."""
    close = pd.Series(closes, dtype=float)
    open_ = close - 0.2
    high = close + 0.5
    low = open_ - 0.3
    volume = pd.Series([1_000_000.0 + i * 10_000 for i in range(len(close))])

    return pd.DataFrame(
        {
            "open": open_.values,
            "high": high.values,
            "low": low.values,
            "close": close.values,
            "volume": volume.values,
        },
        index=_make_timestamps(len(close)),
    )


@pytest.fixture
def make_prices() -> Callable[[Sequence[float]], pd.DataFrame]:
    """Factory building a PriceSeries DataFrame from close prices."""
    return _frame_from_closes


@pytest.fixture
def sample_ohlcv() -> pd.DataFrame:
    """250 days of realistic OHLCV data.

    Long enough for every default indicator, including SMA 200.
    Gradual uptrend with a repeating noise pattern.
    """
    move = [0.5, 0.8, -0.3, 1.0, 0.0, 0.6, -0.7, 0.4, 1.2, -0.5, -1.1, 0.3]
    closes = [100.0]
    for i in range(1, 250):
        closes.append(closes[-1] + move[i % len(move)])
    return _frame_from_closes(closes)


@pytest.fixture
def rising_30() -> pd.DataFrame:
    """30 bars with closes 100, 101, ..., 129."""
    return _frame_from_closes([100.0 + i for i in range(30)])


@pytest.fixture
def ninety_bars() -> pd.DataFrame:
    """90 bars of oscillating prices: too short for SMA 150/200."""
    move = [1.0, -0.5, 0.8, -1.2, 0.4, 0.9]
    closes = [50.0]
    for i in range(1, 90):
        closes.append(closes[-1] + move[i % len(move)])
    return _frame_from_closes(closes)


@pytest.fixture
def all_gains_close() -> pd.Series:
    """Close series where every day is an up day (RSI = 100)."""
    return pd.Series([100.0 + i for i in range(20)], dtype=float)


@pytest.fixture
def all_losses_close() -> pd.Series:
    """Close series where every day is a down day (RSI = 0)."""
    return pd.Series([120.0 - i for i in range(20)], dtype=float)


@pytest.fixture
def linear_close() -> pd.Series:
    """60 closes rising by exactly 1.0 per bar."""
    return pd.Series([100.0 + i for i in range(60)], dtype=float)
