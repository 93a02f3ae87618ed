"""Small numeric helpers: minimum, maximum, absolute value and clamping."""

from __future__ import annotations

import math

__all__ = ["imin", "imax", "iabs", "clamp", "fmin", "fmax", "fabs", "fclamp"]


def imin(a: int, b: int) -> int:
    """Smaller of two integers."""
    return a if a < b else b


def imax(a: int, b: int) -> int:
    """Larger of two integers."""
    return a if a > b else b


def iabs(x: int) -> int:
    """Absolute value of an integer."""
    return -x if x < 0 else x


def clamp(low: int, x: int, high: int) -> int:
    """Limit *x* to [low, high]; when low exceeds high, low wins."""
    return imax(low, imin(x, high))


def fmin(a: float, b: float) -> float:
    """Smaller of two floats; NaN if either argument is NaN."""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a < b else b


def fmax(a: float, b: float) -> float:
    """Larger of two floats; NaN if either argument is NaN."""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return a if a > b else b


def fabs(x: float) -> float:
    """Absolute value of a float."""
    return -x if x < 0.0 else x


def fclamp(low: float, x: float, high: float) -> float:
    """Limit *x* to [low, high]; when low exceeds high, low wins."""
    return fmax(low, fmin(x, high))