"""Module for miscellaneous multi-use functions"""

__all__ = ['normalize_radians', 'round_half_up']

import math

_TWO_PI = 2 * math.pi


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def normalize_radians(value: float) -> float:
    """
    Folds an angle in radians into [0, 2pi). NaN passes through unchanged.

    Args:
        value:
            The angle, in radians

    Returns:
        float
    """
    value = value % _TWO_PI

    # A tiny negative input rounds up to exactly 2pi
    if value >= _TWO_PI:
        return 0.0

    return value
