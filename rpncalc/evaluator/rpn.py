"""Stack-based evaluation of postfix token sequences."""
import math
import operator
from typing import List

from rpncalc.evaluator.errors import (
    DivisionByZeroError,
    MalformedExpressionError,
    NumericOverflowError,
    UnknownOperatorError,
)
from rpncalc.evaluator.tokenizer import Token

# Binary operators, applied as a OP b
_BINARY_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _apply(symbol: str, a: float, b: float) -> float:
    op = _BINARY_OPS.get(symbol)
    if op is None:
        raise UnknownOperatorError(f"Unknown operator: {symbol}")
    if op is operator.truediv and b == 0:
        raise DivisionByZeroError("Division by zero")
    return op(a, b)


def evaluate(postfix: List[Token]) -> float:
    """
    Reduce a postfix sequence to a single value.

    Numbers are pushed; each operator pops b (top) then a and pushes a OP b.

    Raises:
        MalformedExpressionError: Operator with fewer than two operands, or
            a final stack that does not hold exactly one value
        DivisionByZeroError: Right operand of '/' is zero
        UnknownOperatorError: Token that is neither a number nor + - * /
        NumericOverflowError: Result is inf or nan
    """
    stack: List[float] = []

    for token in postfix:
        if token.is_number:
            stack.append(float(token.text))
            continue
        if not token.is_operator:
            raise UnknownOperatorError(f"Unexpected token in postfix sequence: {token.text}")
        if len(stack) < 2:
            raise MalformedExpressionError(f"Insufficient operands for '{token.text}'")
        b = stack.pop()
        a = stack.pop()
        stack.append(_apply(token.text, a, b))

    if len(stack) != 1:
        raise MalformedExpressionError(
            f"Stack has {len(stack)} values after evaluation, expected 1")

    result = stack[0]
    if not math.isfinite(result):
        raise NumericOverflowError(f"Result is not finite: {result}")
    return result
