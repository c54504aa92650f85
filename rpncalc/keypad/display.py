"""Display text accumulated from keypad presses."""
import re

from rpncalc.config import ERROR_TAG

INITIAL_VALUE = "0"
OPERATOR_KEYS = ("+", "-", "*", "/")
_NUMBER_SEPARATORS = re.compile(r"[+\-*/()]")


class Display:
    """
    Calculator display.

    Holds the expression being typed, or the last result / error indicator.
    It does no validation beyond the keypad entry rules in `append`.
    """

    def __init__(self, value: str = INITIAL_VALUE):
        self.value = value

    def append(self, symbol: str):
        """
        Add a keypad symbol.

        On a fresh display ("0") or after an error the symbol replaces the
        text, except that operators are ignored on "0". A second decimal
        point in the same number is ignored.
        """
        if self.value in (INITIAL_VALUE, ERROR_TAG):
            if self.value == INITIAL_VALUE and symbol in OPERATOR_KEYS:
                return
            self.value = symbol
            return

        if symbol == "." and "." in self.current_number():
            return
        self.value += symbol

    def current_number(self) -> str:
        """Text after the last operator or parenthesis."""
        return _NUMBER_SEPARATORS.split(self.value)[-1]

    def clear(self):
        self.value = INITIAL_VALUE

    def show(self, text: str):
        self.value = text

    def __str__(self) -> str:
        return self.value
