"""Button dispatch: special functions and plain token accumulation."""
from __future__ import annotations

import math
from typing import Callable, Dict

import structlog

from core.display import (
    ERROR_DISPLAY,
    INITIAL_DISPLAY,
    append_token,
    format_number,
    parse_float,
    parse_int,
)
from core.errors import FactorialDomainError
from core.evaluator import evaluate
from core.utils import ieee_pow

logger = structlog.get_logger()

# Largest n whose factorial still fits in a float.
MAX_FACTORIAL = 170


def negate(x: float) -> float:
    return x * -1


def percent(x: float) -> float:
    return x / 100


def square_root(x: float) -> float:
    """Square root; NaN for negative input instead of raising."""
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


def square(x: float) -> float:
    return ieee_pow(x, 2)


def cube(x: float) -> float:
    return ieee_pow(x, 3)


def factorial(n: float) -> float:
    """``n!`` for non-negative integers.

    NaN passes through unchanged, the same way the other unary buttons
    treat unparseable input. Results past float range are infinite.
    """

    if math.isnan(n):
        return math.nan
    if n < 0 or not float(n).is_integer():
        raise FactorialDomainError(f"Factorial requires a non-negative integer, got {n}")
    if n > MAX_FACTORIAL:
        return math.inf
    return float(math.factorial(int(n)))


# Tokens that transform the parsed display value in place.
UNARY_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "±": negate,
    "%": percent,
    "√": square_root,
    "x²": square,
    "x³": cube,
}

# Tokens that stand for a number and are typed as its digits.
CONSTANT_TOKENS: Dict[str, float] = {
    "π": math.pi,
    "e": math.e,
}

SPECIAL_TOKENS = ("C", "=", "x!", *UNARY_FUNCTIONS, *CONSTANT_TOKENS)


def is_special(token: str) -> bool:
    return token in SPECIAL_TOKENS


def apply_token(display: str, token: str) -> str:
    """Return the display after pressing the button labelled ``token``."""

    if token == "C":
        return INITIAL_DISPLAY
    if token == "=":
        return evaluate(display)
    if token in CONSTANT_TOKENS:
        return append_token(display, format_number(CONSTANT_TOKENS[token]))
    if token in UNARY_FUNCTIONS:
        return format_number(UNARY_FUNCTIONS[token](parse_float(display)))
    if token == "x!":
        try:
            return format_number(factorial(parse_int(display)))
        except FactorialDomainError as exc:
            logger.info("Factorial failed", display=display, error=str(exc))
            return ERROR_DISPLAY
    return append_token(display, token)
