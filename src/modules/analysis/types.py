"""Data model for the Indicator Engine.

Input bars, engine configuration, and the frozen result bundle
handed to chart and summarization consumers.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

import pandas as pd

from src.modules.analysis.errors import InvalidConfigurationError
from src.modules.analysis.validation import is_valid_multiplier, is_valid_period
from src.modules.signals.classifier import Signal

DEFAULT_SMA_PERIODS = (20, 50, 150, 200)


@dataclass(frozen=True)
class PriceBar:
    """One historical trading period.

    Attributes:
        timestamp: Milliseconds since epoch.
        open: Opening price.
        high: High price.
        low: Low price.
        close: Closing price.
        volume: Traded volume.
    """

    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the loader's record shape."""
        return {
            "timestamp": self.timestamp,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }


@dataclass(frozen=True)
class MACDConfig:
    """MACD periods. `fast` must be strictly shorter than `slow`."""

    fast: int = 12
    slow: int = 26
    signal: int = 9

    def __post_init__(self) -> None:
        if not all(is_valid_period(p) for p in (self.fast, self.slow, self.signal)):
            raise InvalidConfigurationError(
                f"All MACD periods must be integers >= 1, got fast={self.fast!r}, "
                f"slow={self.slow!r}, signal={self.signal!r}"
            )
        # Stricter than positivity: an inverted MACD is rejected outright
        if self.fast >= self.slow:
            raise InvalidConfigurationError(
                f"Fast period must be < slow period, got fast={self.fast}, slow={self.slow}"
            )


@dataclass(frozen=True)
class BollingerConfig:
    """Bollinger Bands window and width."""

    period: int = 20
    std_dev_multiplier: float = 2.0

    def __post_init__(self) -> None:
        if not is_valid_period(self.period):
            raise InvalidConfigurationError(
                f"Bollinger period must be an integer >= 1, got {self.period!r}"
            )
        if not is_valid_multiplier(self.std_dev_multiplier):
            raise InvalidConfigurationError(
                "Standard deviation multiplier must be finite and > 0, "
                f"got {self.std_dev_multiplier!r}"
            )


@dataclass(frozen=True)
class IndicatorConfig:
    """Selects which indicators the engine computes and with which periods.

    Attributes:
        sma_periods: SMA periods to compute. Duplicates are dropped and the
            periods are stored sorted ascending.
        ema_period: EMA period.
        rsi_period: RSI lookback.
        macd: MACD fast/slow/signal periods.
        bollinger: Bollinger Bands period and multiplier.

    Raises:
        InvalidConfigurationError: On construction, if any period is not
            an integer >= 1.
    """

    sma_periods: tuple[int, ...] = DEFAULT_SMA_PERIODS
    ema_period: int = 20
    rsi_period: int = 14
    macd: MACDConfig = field(default_factory=MACDConfig)
    bollinger: BollingerConfig = field(default_factory=BollingerConfig)

    def __post_init__(self) -> None:
        for period in self.sma_periods:
            if not is_valid_period(period):
                raise InvalidConfigurationError(
                    f"SMA period must be an integer >= 1, got {period!r}"
                )
        object.__setattr__(self, "sma_periods", tuple(sorted(set(self.sma_periods))))

        if not is_valid_period(self.ema_period):
            raise InvalidConfigurationError(
                f"EMA period must be an integer >= 1, got {self.ema_period!r}"
            )
        if not is_valid_period(self.rsi_period):
            raise InvalidConfigurationError(
                f"RSI period must be an integer >= 1, got {self.rsi_period!r}"
            )


@dataclass(frozen=True)
class Indicator:
    """A single computed indicator reading.

    Attributes:
        name: Display name, e.g. "SMA 20" or "Upper Band".
        value: Most recent computed value.
        signal: Trading signal, or None where classification does not apply.
        color: Presentation hint for chart overlays.
        values: Full history starting at the first bar with a fully
            populated window, indexed by bar timestamp.
    """

    name: str
    value: float
    signal: Signal | None = None
    color: str | None = None
    values: pd.Series | None = field(default=None, compare=False, repr=False)

    def to_dict(self, include_history: bool = False) -> dict[str, Any]:
        """Serialize for JSON consumers.

        Args:
            include_history: Also emit `values` as {timestamp, value} points.
        """
        data: dict[str, Any] = {
            "name": self.name,
            "value": self.value,
            "signal": self.signal.value if self.signal is not None else None,
            "color": self.color,
        }
        if include_history and self.values is not None:
            data["values"] = [
                {"timestamp": int(ts), "value": float(v)} for ts, v in self.values.items()
            ]
        return data


@dataclass(frozen=True)
class MACDIndicators:
    """MACD line, signal line and histogram."""

    macd_line: Indicator
    signal_line: Indicator
    histogram: Indicator

    def __iter__(self) -> Iterator[Indicator]:
        return iter((self.macd_line, self.signal_line, self.histogram))

    def to_dict(self, include_history: bool = False) -> dict[str, Any]:
        return {
            "macd_line": self.macd_line.to_dict(include_history),
            "signal_line": self.signal_line.to_dict(include_history),
            "histogram": self.histogram.to_dict(include_history),
        }


@dataclass(frozen=True)
class BollingerIndicators:
    """Upper, middle and lower Bollinger bands."""

    upper: Indicator
    middle: Indicator
    lower: Indicator

    def __iter__(self) -> Iterator[Indicator]:
        return iter((self.upper, self.middle, self.lower))

    def to_dict(self, include_history: bool = False) -> dict[str, Any]:
        return {
            "upper": self.upper.to_dict(include_history),
            "middle": self.middle.to_dict(include_history),
            "lower": self.lower.to_dict(include_history),
        }


@dataclass(frozen=True)
class IndicatorBundle:
    """Result of one Indicator Engine run.

    Shallowly frozen: fields cannot be reassigned and `sma` is read-only,
    but `prices` and each `Indicator.values` are pandas objects that
    callers should treat as read-only.

    Any indicator whose warm-up window exceeds the series length is absent:
    missing from `sma`, or None for the other fields.

    Attributes:
        prices: The input price series (timestamp-indexed OHLCV DataFrame).
        sma: SMA indicators keyed by period (read-only).
        ema: EMA indicator.
        rsi: RSI indicator.
        macd: MACD triple.
        bollinger_bands: Bollinger triple.
        last_updated: When the computation ran (UTC).
    """

    prices: pd.DataFrame = field(compare=False, repr=False)
    last_updated: datetime
    sma: Mapping[int, Indicator] = field(default_factory=dict)
    ema: Indicator | None = None
    rsi: Indicator | None = None
    macd: MACDIndicators | None = None
    bollinger_bands: BollingerIndicators | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sma", MappingProxyType(dict(self.sma)))

    def indicators(self) -> list[Indicator]:
        """All present indicators, flattened in display order."""
        result: list[Indicator] = list(self.sma.values())
        for single in (self.ema, self.rsi):
            if single is not None:
                result.append(single)
        for group in (self.macd, self.bollinger_bands):
            if group is not None:
                result.extend(group)
        return result

    def to_dict(self, include_history: bool = False) -> dict[str, Any]:
        """Serialize for chart and summarization consumers.

        Args:
            include_history: Include each indicator's full value history.

        Returns:
            JSON-serializable dict. Absent indicators serialize as None.
        """
        return {
            "prices": _price_records(self.prices),
            "sma": {
                str(period): indicator.to_dict(include_history)
                for period, indicator in self.sma.items()
            },
            "ema": self.ema.to_dict(include_history) if self.ema else None,
            "rsi": self.rsi.to_dict(include_history) if self.rsi else None,
            "macd": self.macd.to_dict(include_history) if self.macd else None,
            "bollinger_bands": (
                self.bollinger_bands.to_dict(include_history)
                if self.bollinger_bands
                else None
            ),
            "last_updated": self.last_updated.isoformat(),
        }

    def summary_lines(self) -> list[str]:
        """Latest value and signal per indicator, one line each.

        Formatted for inclusion in a text-summarization prompt.
        """
        lines = []
        for indicator in self.indicators():
            line = f"- {indicator.name}: {indicator.value:.2f}"
            if indicator.signal is not None:
                line += f" (Signal: {indicator.signal.value})"
            lines.append(line)
        return lines


def _price_records(prices: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a price DataFrame back into loader-shaped records."""
    records: Iterable[dict[str, Any]] = prices.reset_index().to_dict(orient="records")
    return [
        PriceBar(
            timestamp=int(row["timestamp"]),
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]),
        ).to_dict()
        for row in records
    ]
