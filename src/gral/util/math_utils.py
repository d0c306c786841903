"""Numeric helpers shared by layouts, axes and filters."""
from __future__ import annotations

import math


def limit(value: float, lo: float, hi: float) -> float:
    """Clamp `value` into the closed range [lo, hi]."""
    return max(lo, min(value, hi))


def almost_equal(a: float, b: float, delta: float) -> bool:
    return abs(a - b) <= delta


def magnitude(base: float, n: float) -> float:
    """
    Returns the largest integer power of `base` that is not greater than |n|,
    carrying the sign of `n`.

    Examples:
        magnitude(10, 3456.0) -> 1000.0
        magnitude(10, -0.05)  -> -0.01
    """
    if n == 0.0:
        return 0.0
    # log() of exact powers can land just below the integer
    exponent = math.floor(math.log(abs(n)) / math.log(base))
    if base ** (exponent + 1) <= abs(n):
        exponent += 1
    elif base ** exponent > abs(n):
        exponent -= 1
    return math.copysign(base ** exponent, n)


def floor(value: float, step: float) -> float:
    """Round `value` down to a multiple of `step`."""
    if step == 0.0:
        return value
    return math.floor(value / step) * step


def ceil(value: float, step: float) -> float:
    """Round `value` up to a multiple of `step`."""
    if step == 0.0:
        return value
    return math.ceil(value / step) * step


def is_calculatable(value: object) -> bool:
    """True if `value` is a real number that is neither NaN nor infinite."""
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False
