"""Error taxonomy for the Indicator Engine.

All errors subclass ValueError so callers that already guard
bad-input paths with `except ValueError` keep working.
"""


class IndicatorError(ValueError):
    """Base class for indicator computation errors."""


class InsufficientDataError(IndicatorError):
    """Raised when a series is shorter than an indicator's warm-up window.

    The engine converts this into an omitted indicator rather than
    failing the whole computation.
    """

    def __init__(self, indicator: str, required: int, available: int) -> None:
        """Initialize InsufficientDataError.

        Args:
            indicator: Name of the indicator that could not be computed.
            required: Minimum number of bars the indicator needs.
            available: Number of bars actually supplied.
        """
        self.indicator = indicator
        self.required = required
        self.available = available
        super().__init__(
            f"{indicator} needs at least {required} bars, got {available}"
        )


class InvalidSeriesError(IndicatorError):
    """Raised when the input series is empty, malformed or non-finite."""


class InvalidConfigurationError(IndicatorError):
    """Raised when a period or multiplier is out of range."""
