"""Shunting-Yard conversion from infix tokens to postfix (RPN) order."""
from typing import List

from rpncalc.evaluator.errors import UnbalancedParenthesesError
from rpncalc.evaluator.tokenizer import Token, TokenType

PRECEDENCE = {
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
}


def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Reorder infix tokens into postfix order.

    All operators are binary and left-associative: an operator on the
    stack with precedence >= the incoming one is popped first.

    Raises:
        UnbalancedParenthesesError: On a ')' without a matching '(' or a
            '(' left open at the end of input
    """
    output: List[Token] = []
    operators: List[Token] = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)
        elif token.type == TokenType.OPERATOR:
            while (
                operators
                and operators[-1].is_operator
                and PRECEDENCE[operators[-1].text] >= PRECEDENCE[token.text]
            ):
                output.append(operators.pop())
            operators.append(token)
        elif token.type == TokenType.LEFT_PAREN:
            operators.append(token)
        elif token.type == TokenType.RIGHT_PAREN:
            while operators and operators[-1].type != TokenType.LEFT_PAREN:
                output.append(operators.pop())
            if not operators:
                raise UnbalancedParenthesesError("Closing parenthesis without opening")
            operators.pop()

    while operators:
        token = operators.pop()
        if token.type == TokenType.LEFT_PAREN:
            raise UnbalancedParenthesesError("Opening parenthesis never closed")
        output.append(token)

    return output
