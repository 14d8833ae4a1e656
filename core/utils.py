"""Float helpers that follow IEEE-754 instead of raising."""
from __future__ import annotations

import math


def ieee_divide(a: float, b: float) -> float:
    """Divide like a float unit would: ``x/0`` is signed infinity, ``0/0`` NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def ieee_pow(base: float, exponent: float) -> float:
    """``base ** exponent`` with overflow mapped to infinity.

    A fractional power of a negative base has no real value and gives NaN.
    """
    if base == 0 and exponent < 0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        return math.nan
