"""Exceptions raised by the calculator core."""
from __future__ import annotations


class CalculatorError(Exception):
    """Base exception for calculator errors."""


class EvaluationError(CalculatorError):
    """Raised when a display string is not a valid arithmetic expression."""


class FactorialDomainError(CalculatorError):
    """Raised when factorial is requested for a negative integer."""
