"""Module for miscellaneous multi-use functions"""

__all__ = ['clamp', 'round_half_away']

import math


def round_half_away(value: float) -> int:
    """
    Rounds a float to the nearest whole, where a value exactly between the two nearest
    wholes is rounded away from zero (unlike python's built-in banker's rounding).

    Args:
        value:
            The float value to be rounded

    Returns:
        int
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamps an integer into the closed interval [lower, upper]"""
    return max(lower, min(value, upper))
