"""Parameter checks shared by the indicator configs and calculators."""

import math
from numbers import Integral, Real


def is_valid_period(period: object) -> bool:
    """True if `period` is an integer >= 1 (bools excluded)."""
    return isinstance(period, Integral) and not isinstance(period, bool) and period >= 1


def is_valid_multiplier(multiplier: object) -> bool:
    """True if `multiplier` is a finite real number > 0."""
    return (
        isinstance(multiplier, Real)
        and not isinstance(multiplier, bool)
        and math.isfinite(multiplier)
        and multiplier > 0
    )
