"""Signal Classifier — maps latest indicator readings to trading signals.

One pure function per indicator family. Deterministic, no state.

Rules:
    Moving averages: BUY if close > average, else SELL (no neutral state).
    RSI: SELL above 70 (overbought), BUY below 30 (oversold), else NEUTRAL.
    MACD line / signal line: BUY if MACD > signal, else SELL.
    MACD histogram: BUY if > 0, else SELL.
    Bollinger upper: SELL if close >= upper, else NEUTRAL.
    Bollinger lower: BUY if close <= lower, else NEUTRAL.
"""

from enum import StrEnum

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0


class Signal(StrEnum):
    """Discrete trading signal attached to an indicator."""

    BUY = "buy"
    SELL = "sell"
    NEUTRAL = "neutral"


def classify_moving_average(close: float, average: float) -> Signal:
    """Classify price position relative to a moving average.

    Ties resolve to SELL: the comparison is strict.

    Args:
        close: Latest closing price.
        average: Latest SMA or EMA value.

    Returns:
        BUY if price is above the average, otherwise SELL.
    """
    return Signal.BUY if close > average else Signal.SELL


def classify_rsi(value: float) -> Signal:
    """Classify an RSI reading.

    Args:
        value: Latest RSI value (0-100).

    Returns:
        SELL when overbought, BUY when oversold, NEUTRAL otherwise.
    """
    if value > RSI_OVERBOUGHT:
        return Signal.SELL
    if value < RSI_OVERSOLD:
        return Signal.BUY
    return Signal.NEUTRAL


def classify_macd(macd_value: float, signal_value: float) -> Signal:
    """Classify the MACD line against its signal line.

    Used for both the MACD line and the signal line indicators.
    """
    return Signal.BUY if macd_value > signal_value else Signal.SELL


def classify_histogram(value: float) -> Signal:
    """Classify the MACD histogram by sign."""
    return Signal.BUY if value > 0 else Signal.SELL


def classify_upper_band(close: float, upper: float) -> Signal:
    """Classify price against the upper Bollinger band.

    Args:
        close: Latest closing price.
        upper: Latest upper band value.

    Returns:
        SELL if price touches or exceeds the band, otherwise NEUTRAL.
    """
    return Signal.SELL if close >= upper else Signal.NEUTRAL


def classify_lower_band(close: float, lower: float) -> Signal:
    """Classify price against the lower Bollinger band.

    Args:
        close: Latest closing price.
        lower: Latest lower band value.

    Returns:
        BUY if price touches or falls below the band, otherwise NEUTRAL.
    """
    return Signal.BUY if close <= lower else Signal.NEUTRAL
