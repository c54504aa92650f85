"""Tokenizer: raw expression text to an ordered list of tokens."""
import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List

from rpncalc.evaluator.errors import InvalidExpressionError

logger = logging.getLogger(__name__)

# Unsigned decimal literal ("12", "12.5", "12.", ".5") or a single symbol
TOKEN_PATTERN = re.compile(r"\d+\.?\d*|\.\d+|[+\-*/()]", re.ASCII)
LEADING_SIGN_PATTERN = re.compile(r"^([+\-])")

OPERATORS = ("+", "-", "*", "/")


class TokenType(str, Enum):
    """Lexical token classes."""
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True)
class Token:
    """A lexical token: numeric literal text or a single symbol."""
    type: TokenType
    text: str

    @classmethod
    def from_text(cls, text: str) -> "Token":
        if text in OPERATORS:
            return cls(TokenType.OPERATOR, text)
        if text == "(":
            return cls(TokenType.LEFT_PAREN, text)
        if text == ")":
            return cls(TokenType.RIGHT_PAREN, text)
        return cls(TokenType.NUMBER, text)

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR


def normalize_leading_sign(expression: str) -> str:
    """Prefix a leading '+' or '-' with an implicit zero (-5+2 -> 0-5+2)."""
    return LEADING_SIGN_PATTERN.sub(r"0\1", expression)


def tokenize(expression: str) -> List[Token]:
    """
    Split an infix expression into tokens.

    Characters that match neither a number nor a symbol (whitespace,
    letters, ...) are skipped.

    Args:
        expression: Raw expression text, e.g. "-5 + 2*(3.5)"

    Returns:
        Tokens in source order

    Raises:
        InvalidExpressionError: If no token could be extracted
    """
    normalized = normalize_leading_sign(expression)
    tokens = [Token.from_text(match) for match in TOKEN_PATTERN.findall(normalized)]
    if not tokens:
        raise InvalidExpressionError(f"No tokens found in '{expression}'")
    logger.debug(f"Tokenized '{expression}' into {len(tokens)} tokens")
    return tokens
