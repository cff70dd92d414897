"""PriceSeries construction and validation.

A PriceSeries is a DataFrame with columns open, high, low, close, volume,
indexed by `timestamp` (integer milliseconds since epoch, oldest first).
"""

from collections.abc import Iterable, Mapping
from dataclasses import asdict
from typing import Any

import numpy as np
import pandas as pd

from src.modules.analysis.errors import InvalidSeriesError
from src.modules.analysis.types import PriceBar

OHLC_COLUMNS = ["open", "high", "low", "close"]
PRICE_COLUMNS = [*OHLC_COLUMNS, "volume"]
INDEX_NAME = "timestamp"


def to_epoch_millis(index: pd.DatetimeIndex) -> pd.Index:
    """Convert a DatetimeIndex to integer epoch milliseconds.

    Naive timestamps are treated as UTC.
    """
    return pd.Index(index.as_unit("ms").asi8, name=INDEX_NAME)


def to_price_series(
    data: pd.DataFrame | Iterable[PriceBar | Mapping[str, Any]],
) -> pd.DataFrame:
    """Build a PriceSeries from bars, loader records or a DataFrame.

    DataFrames are copied, never modified. A `timestamp` column is moved
    into the index; a DatetimeIndex is converted to epoch milliseconds.

    Args:
        data: A DataFrame, or an iterable of PriceBar objects or
            {timestamp, open, high, low, close, volume} mappings.

    Returns:
        New timestamp-indexed DataFrame with the standard price columns.

    Raises:
        InvalidSeriesError: If required columns are missing.
    """
    if isinstance(data, pd.DataFrame):
        df = data.copy()
    else:
        rows = [asdict(row) if isinstance(row, PriceBar) else dict(row) for row in data]
        df = pd.DataFrame(rows, columns=[INDEX_NAME, *PRICE_COLUMNS] if not rows else None)

    if INDEX_NAME in df.columns:
        df = df.set_index(INDEX_NAME)
    elif isinstance(df.index, pd.DatetimeIndex):
        df.index = to_epoch_millis(df.index)

    missing = set(PRICE_COLUMNS) - set(df.columns)
    if missing:
        raise InvalidSeriesError(f"Missing required columns: {sorted(missing)}")

    df.index.name = INDEX_NAME
    return df[PRICE_COLUMNS]


def validate_price_series(df: pd.DataFrame) -> None:
    """Check that a PriceSeries can feed the indicator calculators.

    Timestamp ordering is assumed, not checked. Volume must be numeric but
    may be NaN or infinite, since no calculator reads it.

    Args:
        df: Timestamp-indexed price DataFrame.

    Raises:
        InvalidSeriesError: If the series is empty, non-numeric, or
            contains NaN or infinite prices.
    """
    if df.empty:
        raise InvalidSeriesError("Price series is empty")

    try:
        values = df[PRICE_COLUMNS].to_numpy(dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidSeriesError(f"Price series contains non-numeric values: {e}") from e

    finite = np.isfinite(values[:, : len(OHLC_COLUMNS)])
    if not finite.all():
        bad_rows = int((~finite).any(axis=1).sum())
        raise InvalidSeriesError(
            f"Price series contains {bad_rows} bar(s) with NaN or infinite values"
        )
