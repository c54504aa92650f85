"""Keypad symbol to action mapping."""
from enum import Enum
from typing import Dict


class Action(str, Enum):
    APPEND_DIGIT = "append_digit"
    APPEND_OPERATOR = "append_operator"
    CLEAR = "clear"
    EVALUATE = "evaluate"
    TOGGLE_HISTORY = "toggle_history"


actions: Dict[str, Action] = {
    **{digit: Action.APPEND_DIGIT for digit in "0123456789."},
    **{symbol: Action.APPEND_OPERATOR for symbol in "+-*/()"},
    "C": Action.CLEAR,
    "=": Action.EVALUATE,
    "H": Action.TOGGLE_HISTORY,
}


def resolve_action(symbol: str) -> Action:
    """Look up the action bound to a keypad symbol.

    Raises:
        KeyError: If no key is bound to `symbol`
    """
    try:
        return actions[symbol]
    except KeyError:
        raise KeyError(f"No keypad action for symbol '{symbol}'")


def keypad_symbols():
    """All bound symbols, in keypad order."""
    return list(actions.keys())
