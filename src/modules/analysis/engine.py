"""Indicator Engine — orchestrates technical indicator computation.

Runs every configured calculator over one price series, classifies each
reading into a signal, and assembles an immutable IndicatorBundle.
This is the single entry point for indicator computation.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

import pandas as pd

from src.modules.analysis.errors import InsufficientDataError
from src.modules.analysis.indicators.momentum import rsi
from src.modules.analysis.indicators.moving_average import ema, sma
from src.modules.analysis.indicators.trend import macd
from src.modules.analysis.indicators.volatility import bollinger_bands
from src.modules.analysis.series import to_price_series, validate_price_series
from src.modules.analysis.types import (
    BollingerIndicators,
    Indicator,
    IndicatorBundle,
    IndicatorConfig,
    MACDIndicators,
    PriceBar,
)
from src.modules.signals.classifier import (
    classify_histogram,
    classify_lower_band,
    classify_macd,
    classify_moving_average,
    classify_rsi,
    classify_upper_band,
)
from src.shared.logger import get_logger

logger = get_logger(__name__)

# Chart overlay colors
SMA_COLOR = "#2196F3"
EMA_COLOR = "#4CAF50"
RSI_COLOR = "#FF9800"
MACD_LINE_COLOR = "#E91E63"
SIGNAL_LINE_COLOR = "#9C27B0"
HISTOGRAM_COLOR = "#673AB7"
UPPER_BAND_COLOR = "#F44336"
MIDDLE_BAND_COLOR = "#3F51B5"
LOWER_BAND_COLOR = "#009688"

PriceInput = pd.DataFrame | Iterable[PriceBar | Mapping[str, Any]]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class IndicatorEngine:
    """Computes technical indicators for a given price series.

    Each indicator is computed independently. An indicator whose warm-up
    window is longer than the series is omitted from the bundle; the
    others are still returned.

    Usage:
        engine = IndicatorEngine()
        bundle = engine.compute(price_df, IndicatorConfig(sma_periods=(20,)))
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        """Initialize the engine.

        Args:
            clock: Source of the bundle's `last_updated` timestamp.
        """
        self._clock = clock

    def compute(
        self,
        series: PriceInput,
        config: IndicatorConfig | None = None,
    ) -> IndicatorBundle:
        """Compute all configured indicators for the input series.

        Args:
            series: Timestamp-indexed OHLCV DataFrame, or an iterable of
                PriceBar objects / loader records, oldest first.
            config: Indicator selection and periods. Defaults to
                IndicatorConfig().

        Returns:
            IndicatorBundle with every indicator that had enough data.

        Raises:
            InvalidSeriesError: If the series is empty, malformed, or
                contains non-finite prices.
        """
        config = config or IndicatorConfig()
        prices = to_price_series(series)
        validate_price_series(prices)

        close = prices["close"].astype(float)

        sma_indicators = {}
        for period in config.sma_periods:
            indicator = self._omit_if_insufficient(self._sma, close, period)
            if indicator is not None:
                sma_indicators[period] = indicator

        bundle = IndicatorBundle(
            prices=prices,
            last_updated=self._clock(),
            sma=sma_indicators,
            ema=self._omit_if_insufficient(self._ema, close, config.ema_period),
            rsi=self._omit_if_insufficient(self._rsi, close, config.rsi_period),
            macd=self._omit_if_insufficient(
                self._macd, close, config.macd.fast, config.macd.slow, config.macd.signal
            ),
            bollinger_bands=self._omit_if_insufficient(
                self._bollinger,
                close,
                config.bollinger.period,
                config.bollinger.std_dev_multiplier,
            ),
        )

        logger.info(
            f"Computed {len(bundle.indicators())} indicators for {len(prices)} bars",
            extra={"bars": len(prices)},
        )

        return bundle

    def _omit_if_insufficient(self, build: Callable[..., Any], *args: Any) -> Any:
        """Run a builder, returning None when the series is too short."""
        try:
            return build(*args)
        except InsufficientDataError as e:
            logger.info(
                f"Omitting {e.indicator}: {e}",
                extra={"indicator": e.indicator, "required": e.required, "available": e.available},
            )
            return None

    def _sma(self, close: pd.Series, period: int) -> Indicator:
        values = sma(close, period).dropna()
        latest = float(values.iloc[-1])
        return Indicator(
            name=f"SMA {period}",
            value=latest,
            signal=classify_moving_average(float(close.iloc[-1]), latest),
            color=SMA_COLOR,
            values=values,
        )

    def _ema(self, close: pd.Series, period: int) -> Indicator:
        values = ema(close, period).dropna()
        latest = float(values.iloc[-1])
        return Indicator(
            name=f"EMA {period}",
            value=latest,
            signal=classify_moving_average(float(close.iloc[-1]), latest),
            color=EMA_COLOR,
            values=values,
        )

    def _rsi(self, close: pd.Series, period: int) -> Indicator:
        values = rsi(close, period).dropna()
        latest = float(values.iloc[-1])
        return Indicator(
            name="RSI",
            value=latest,
            signal=classify_rsi(latest),
            color=RSI_COLOR,
            values=values,
        )

    def _macd(self, close: pd.Series, fast: int, slow: int, signal: int) -> MACDIndicators:
        result = macd(close, fast=fast, slow=slow, signal=signal)
        macd_values = result["macd"].dropna()
        signal_values = result["signal"].dropna()
        histogram_values = result["histogram"].dropna()

        latest_macd = float(macd_values.iloc[-1])
        latest_signal = float(signal_values.iloc[-1])
        latest_histogram = float(histogram_values.iloc[-1])
        crossover = classify_macd(latest_macd, latest_signal)

        return MACDIndicators(
            macd_line=Indicator(
                name="MACD Line",
                value=latest_macd,
                signal=crossover,
                color=MACD_LINE_COLOR,
                values=macd_values,
            ),
            signal_line=Indicator(
                name="Signal Line",
                value=latest_signal,
                signal=crossover,
                color=SIGNAL_LINE_COLOR,
                values=signal_values,
            ),
            histogram=Indicator(
                name="MACD Histogram",
                value=latest_histogram,
                signal=classify_histogram(latest_histogram),
                color=HISTOGRAM_COLOR,
                values=histogram_values,
            ),
        )

    def _bollinger(
        self, close: pd.Series, period: int, std_dev_multiplier: float
    ) -> BollingerIndicators:
        bands = bollinger_bands(close, period=period, std_dev_multiplier=std_dev_multiplier).dropna()
        latest_close = float(close.iloc[-1])
        latest_upper = float(bands["upper"].iloc[-1])
        latest_lower = float(bands["lower"].iloc[-1])

        return BollingerIndicators(
            upper=Indicator(
                name="Upper Band",
                value=latest_upper,
                signal=classify_upper_band(latest_close, latest_upper),
                color=UPPER_BAND_COLOR,
                values=bands["upper"],
            ),
            # Centerline carries no signal
            middle=Indicator(
                name="Middle Band",
                value=float(bands["middle"].iloc[-1]),
                color=MIDDLE_BAND_COLOR,
                values=bands["middle"],
            ),
            lower=Indicator(
                name="Lower Band",
                value=latest_lower,
                signal=classify_lower_band(latest_close, latest_lower),
                color=LOWER_BAND_COLOR,
                values=bands["lower"],
            ),
        )


def compute_indicators(
    series: PriceInput,
    config: IndicatorConfig | None = None,
) -> IndicatorBundle:
    """Compute an IndicatorBundle with a default IndicatorEngine."""
    return IndicatorEngine().compute(series, config)
