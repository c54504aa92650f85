# rpncalc/tools/calculator.py

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from rpncalc.config import DISPLAY_DECIMALS, ERROR_TAG
from rpncalc.evaluator.converter import to_postfix
from rpncalc.evaluator.errors import CalculatorError, ErrorKind
from rpncalc.evaluator.rpn import evaluate
from rpncalc.evaluator.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one evaluation: a value or an error kind, never both."""
    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def round_for_display(value: float, decimals: int = DISPLAY_DECIMALS) -> float:
    """
    Round to `decimals` places only if the value's shortest decimal
    representation has more digits than that after the point.

    Examples:
        >>> round_for_display(0.1 + 0.2)
        0.3
        >>> round_for_display(2.5)
        2.5
    """
    exponent = Decimal(repr(value)).as_tuple().exponent
    if -exponent > decimals:
        value = round(value, decimals)
    # round() can leave -0.0 behind for tiny negatives
    return value + 0.0 if value == 0 else value


def format_result(value: float) -> str:
    """
    Render a result for the display ("14" rather than "14.0").

    Always positional: the display text is fed back to the tokenizer,
    which has no exponent syntax.
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def calculate_detailed(expr: str) -> CalculationResult:
    """
    Evaluate an arithmetic expression, keeping the failure kind.

    Supports +, -, *, / over decimal literals, parentheses and a leading
    unary sign.
    """
    try:
        tokens = tokenize(expr)
        postfix = to_postfix(tokens)
        result = evaluate(postfix)
    except CalculatorError as e:
        logger.warning(f"Calculation failed ({e.kind.value}) for '{expr}': {e}")
        return CalculationResult(error=e.kind, message=str(e))
    return CalculationResult(value=round_for_display(result))


def calculate(expr: str) -> Union[float, str]:
    """
    Evaluate an arithmetic expression.

    Returns the (display-rounded) value, or ERROR_TAG for any failure.

    Examples:
        >>> calculate("2+3*4")
        14.0
        >>> calculate("5/0")
        'Error'
    """
    outcome = calculate_detailed(expr)
    if not outcome.ok:
        return ERROR_TAG
    return outcome.value


if __name__ == "__main__":
    while True:
        expr = input("Enter expression (or 'q' to quit): ")
        if expr.lower() == "q":
            break
        outcome = calculate_detailed(expr)
        if outcome.ok:
            print("=", format_result(outcome.value))
        else:
            print("Error:", outcome.message)
