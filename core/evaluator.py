"""Arithmetic evaluation of the accumulated display string.

The display is rewritten into Python infix syntax (``×`` → ``*``, ``÷`` →
``/``, ``^`` → ``**``), parsed with :mod:`ast` and walked with a whitelist.
Only numbers, ``+ - * / **``, parentheses, a handful of constants and
single-argument functions are accepted; anything else is an
:class:`~core.errors.EvaluationError`.
"""
from __future__ import annotations

import ast
import math
import operator as op
import re
import warnings
from typing import Callable, Dict

import structlog

from core.display import ERROR_DISPLAY, format_number
from core.errors import EvaluationError
from core.utils import ieee_divide, ieee_pow

logger = structlog.get_logger()

# Display glyphs and their Python operator spelling.
GLYPHS = {"×": "*", "÷": "/", "^": "**"}

BINARY_OPERATORS: Dict[type, Callable[[float, float], float]] = {
    ast.Add: op.add,
    ast.Sub: op.sub,
    ast.Mult: op.mul,
    ast.Div: ieee_divide,
    ast.Pow: ieee_pow,
}

UNARY_OPERATORS: Dict[type, Callable[[float], float]] = {
    ast.UAdd: op.pos,
    ast.USub: op.neg,
}

CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "Infinity": math.inf,
    "NaN": math.nan,
}

FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "log": math.log,
    "ln": math.log,
    "sqrt": math.sqrt,
    "abs": abs,
}

_LEADING_ZEROS = re.compile(r"(?<![\w.])0+(?=\d)")
_AFTER_GROUP = re.compile(r"(?<=\))(?=[\w.])")
_BEFORE_FUNCTION = re.compile(
    r"(?<=[\d.)])(?=(?:" + "|".join(FUNCTIONS) + r")\()"
)


def normalize(expr: str) -> str:
    """Rewrite display text as a Python expression.

    Glyphs become operators, redundant leading zeros are dropped (``05`` is
    a syntax error in Python) and juxtaposition multiplies: ``(1+2)3`` and
    ``2sin(0)`` gain the missing ``*``.
    """
    for glyph, symbol in GLYPHS.items():
        expr = expr.replace(glyph, symbol)
    expr = _LEADING_ZEROS.sub("", expr)
    expr = _AFTER_GROUP.sub("*", expr)
    return _BEFORE_FUNCTION.sub("*", expr)


def _number(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EvaluationError(f"Unsupported literal: {value!r}")
    try:
        return float(value)
    except OverflowError:
        return math.inf


def _eval(node: ast.AST) -> float:
    if isinstance(node, ast.Expression):
        return _eval(node.body)
    if isinstance(node, ast.Constant):
        return _number(node.value)
    if isinstance(node, ast.BinOp):
        oper = BINARY_OPERATORS.get(type(node.op))
        if oper is None:
            raise EvaluationError(f"Operator not allowed: {type(node.op).__name__}")
        return oper(_eval(node.left), _eval(node.right))
    if isinstance(node, ast.UnaryOp):
        oper = UNARY_OPERATORS.get(type(node.op))
        if oper is None:
            raise EvaluationError(f"Operator not allowed: {type(node.op).__name__}")
        return oper(_eval(node.operand))
    if isinstance(node, ast.Name):
        if node.id not in CONSTANTS:
            raise EvaluationError(f"Unknown symbol: {node.id}")
        return CONSTANTS[node.id]
    if isinstance(node, ast.Call):
        if node.keywords or len(node.args) != 1:
            raise EvaluationError("Functions take exactly one argument")
        if isinstance(node.func, ast.Name):
            func = FUNCTIONS.get(node.func.id)
            if func is None:
                raise EvaluationError(f"Unknown function: {node.func.id}")
            return float(func(_eval(node.args[0])))
        # "2(3)" and "(1+2)(4)": a parenthesised factor multiplies
        return _eval(node.func) * _eval(node.args[0])
    raise EvaluationError(f"Expression not allowed: {type(node).__name__}")


def evaluate_expression(expr: str) -> float:
    """Evaluate ``expr`` and return its value.

    Raises :class:`EvaluationError` for anything that is not a well formed
    arithmetic expression, including math domain errors such as ``ln(0)``.
    """

    source = normalize(expr).strip()
    if not source:
        raise EvaluationError("Empty expression")
    try:
        with warnings.catch_warnings():
            # "2(3)" parses fine but warns that an int is not callable
            warnings.simplefilter("ignore", SyntaxWarning)
            tree = ast.parse(source, mode="eval")
        return _eval(tree)
    except EvaluationError:
        raise
    except (SyntaxError, ValueError, TypeError, OverflowError, RecursionError, MemoryError) as exc:
        raise EvaluationError(f"Invalid expression: {exc}") from exc


def evaluate(display: str) -> str:
    """Evaluate the display and return the new display text.

    Never raises: failures come back as ``"Error"`` so the calculator stays
    usable.
    """

    try:
        return format_number(evaluate_expression(display))
    except EvaluationError as exc:
        logger.info("Evaluation failed", expression=display, error=str(exc))
        return ERROR_DISPLAY
