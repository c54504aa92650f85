"""Errors raised by the evaluation stages."""
from enum import Enum


class ErrorKind(str, Enum):
    """Stage-specific failure kinds."""
    INVALID_EXPRESSION = "invalid_expression"
    UNBALANCED_PARENTHESES = "unbalanced_parentheses"
    MALFORMED_EXPRESSION = "malformed_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    UNKNOWN_OPERATOR = "unknown_operator"
    NUMERIC_OVERFLOW = "numeric_overflow"


class CalculatorError(Exception):
    """Base exception for evaluation errors."""
    kind: ErrorKind


class InvalidExpressionError(CalculatorError):
    """Raised when no tokens can be extracted from the input."""
    kind = ErrorKind.INVALID_EXPRESSION


class UnbalancedParenthesesError(CalculatorError):
    """Raised when '(' and ')' do not pair up."""
    kind = ErrorKind.UNBALANCED_PARENTHESES


class MalformedExpressionError(CalculatorError):
    """Raised when an operator lacks operands or values are left over."""
    kind = ErrorKind.MALFORMED_EXPRESSION


class DivisionByZeroError(CalculatorError):
    """Raised when the right operand of '/' is zero."""
    kind = ErrorKind.DIVISION_BY_ZERO


class UnknownOperatorError(CalculatorError):
    """Raised when a token that is not a supported operator reaches evaluation."""
    kind = ErrorKind.UNKNOWN_OPERATOR


class NumericOverflowError(CalculatorError):
    """Raised when the result is not a finite number."""
    kind = ErrorKind.NUMERIC_OVERFLOW
