"""Tests for PriceSeries construction and validation."""

import pandas as pd
import pytest

from src.modules.analysis.errors import InvalidSeriesError
from src.modules.analysis.series import (
    PRICE_COLUMNS,
    to_epoch_millis,
    to_price_series,
    validate_price_series,
)
from src.modules.analysis.types import PriceBar

RECORDS = [
    {"timestamp": 1704207600000, "open": 10.0, "high": 11.0, "low": 9.5, "close": 10.5, "volume": 1000},
    {"timestamp": 1704294000000, "open": 10.5, "high": 12.0, "low": 10.0, "close": 11.5, "volume": 1500},
]


class TestToPriceSeries:
    """Tests for to_price_series()."""

    def test_from_records(self) -> None:
        """Loader records become a timestamp-indexed frame."""
        df = to_price_series(RECORDS)

        assert list(df.columns) == PRICE_COLUMNS
        assert df.index.name == "timestamp"
        assert list(df.index) == [1704207600000, 1704294000000]
        assert df["close"].tolist() == [10.5, 11.5]

    def test_from_price_bars(self) -> None:
        """PriceBar objects convert the same way as records."""
        bars = [PriceBar(**record) for record in RECORDS]
        pd.testing.assert_frame_equal(to_price_series(bars), to_price_series(RECORDS))

    def test_from_frame_with_timestamp_column(self) -> None:
        """A timestamp column moves into the index."""
        df = to_price_series(pd.DataFrame(RECORDS))
        assert df.index.name == "timestamp"
        assert "timestamp" not in df.columns

    def test_from_datetime_index(self) -> None:
        """A DatetimeIndex is converted to epoch milliseconds."""
        source = pd.DataFrame(
            {col: [1.0, 2.0] for col in PRICE_COLUMNS},
            index=pd.DatetimeIndex(["2024-01-02", "2024-01-03"]),
        )
        df = to_price_series(source)
        assert list(df.index) == [1704153600000, 1704240000000]

    def test_extra_columns_dropped(self) -> None:
        """Only the standard price columns are kept, in order."""
        source = pd.DataFrame(RECORDS).assign(adjusted_close=1.0)
        assert list(to_price_series(source).columns) == PRICE_COLUMNS

    def test_does_not_modify_input_frame(self) -> None:
        """The input frame keeps its timestamp column."""
        source = pd.DataFrame(RECORDS)
        to_price_series(source)
        assert "timestamp" in source.columns

    def test_empty_records(self) -> None:
        """No records yields an empty frame with the standard columns."""
        df = to_price_series([])
        assert df.empty
        assert list(df.columns) == PRICE_COLUMNS

    def test_missing_columns(self) -> None:
        """Records without a volume field are rejected."""
        records = [{k: v for k, v in RECORDS[0].items() if k != "volume"}]
        with pytest.raises(InvalidSeriesError, match="volume"):
            to_price_series(records)


class TestValidatePriceSeries:
    """Tests for validate_price_series()."""

    def test_valid_series(self) -> None:
        """A well-formed series passes."""
        validate_price_series(to_price_series(RECORDS))

    def test_empty_series(self) -> None:
        """An empty series is rejected."""
        with pytest.raises(InvalidSeriesError, match="empty"):
            validate_price_series(to_price_series([]))

    def test_non_finite_values(self) -> None:
        """NaN or infinite prices are rejected and counted per bar."""
        df = to_price_series(RECORDS)
        df.loc[df.index[0], "open"] = float("nan")
        df.loc[df.index[0], "close"] = float("inf")
        with pytest.raises(InvalidSeriesError, match="1 bar"):
            validate_price_series(df)

    def test_missing_volume_is_allowed(self) -> None:
        """NaN or infinite volume does not invalidate the series."""
        df = to_price_series(RECORDS)
        df["volume"] = [float("nan"), float("inf")]
        validate_price_series(df)

    def test_non_numeric_values(self) -> None:
        """Unparseable prices are rejected."""
        records = [dict(RECORDS[0], close="n/a")]
        with pytest.raises(InvalidSeriesError, match="non-numeric"):
            validate_price_series(to_price_series(records))


class TestToEpochMillis:
    """Tests for to_epoch_millis()."""

    def test_timezone_aware_index(self) -> None:
        """Aware timestamps convert via UTC."""
        index = pd.DatetimeIndex(["2024-01-02 09:30"]).tz_localize("America/New_York")
        assert list(to_epoch_millis(index)) == [1704205800000]
