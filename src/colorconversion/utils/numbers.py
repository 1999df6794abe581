"""Numeric helpers shared by the conversion functions."""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always going up.

    Python's built-in round() uses banker's rounding (round(126.5) == 126),
    which would shift channel values on exact halves.

    Example:
        >>> round_half_up(126.5)
        127
        >>> round_half_up(-0.5)
        0
    """
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit `value` to the inclusive range [lower, upper]."""
    return max(lower, min(value, upper))
