"""Display buffer helpers: token accumulation, lenient parsing, formatting."""
from __future__ import annotations

import math
import re
from decimal import Decimal

INITIAL_DISPLAY = "0"
ERROR_DISPLAY = "Error"

# Displays that the next token replaces instead of extending.
RESET_DISPLAYS = (INITIAL_DISPLAY, ERROR_DISPLAY)

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def append_token(current: str, token: str) -> str:
    """Return the display after pressing ``token``.

    A fresh (``"0"``) or failed (``"Error"``) display is replaced by the
    token; anything else is extended. Nothing is validated here, malformed
    input only surfaces when the expression is evaluated.
    """

    if current in RESET_DISPLAYS:
        return token
    return current + token


def parse_float(text: str) -> float:
    """Read the leading number in ``text``, or NaN when there is none.

    Only the numeric prefix counts, so ``"2+3"`` parses as ``2.0``. This is
    what the unary buttons operate on.
    """

    m = _FLOAT_PREFIX.match(text or "")
    if not m:
        return math.nan
    value = m.group(1)
    if value.lstrip("+-") == "Infinity":
        return -math.inf if value.startswith("-") else math.inf
    return float(value)


def parse_int(text: str) -> float:
    """Read the leading integer in ``text``; NaN when there is none.

    Returned as a float so NaN can flow through like in ``parse_float``.
    """

    m = _INT_PREFIX.match(text or "")
    if not m:
        return math.nan
    return float(int(m.group(1)))


def format_number(x: float) -> str:
    """Canonical display text for a numeric result.

    Integral values drop the ``.0``, non-finite values read ``NaN`` /
    ``Infinity`` / ``-Infinity`` and magnitudes outside ``[1e-6, 1e21)``
    use unpadded exponent notation (``1e-7``, ``1e+21``).
    """

    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"
    magnitude = abs(x)
    if magnitude >= 1e21 or magnitude < 1e-6:
        mantissa, _, exponent = repr(x).partition("e")
        if mantissa.endswith(".0"):
            mantissa = mantissa[:-2]
        sign = "-" if exponent.startswith("-") else "+"
        return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"
    # shortest round-trip digits, spelled out without an exponent
    return format(Decimal(repr(x)).normalize(), "f")
