"""Input guards applied before an expression is evaluated."""
import logging
from typing import List, Optional, Tuple

from rpncalc.config import ERROR_TAG, MAX_EXPRESSION_LENGTH

logger = logging.getLogger(__name__)

ALLOWED_CHARACTERS = set("0123456789.+-*/() \t")


def find_unrecognized_characters(expression: str) -> List[str]:
    """
    Find characters the tokenizer will silently drop.

    Args:
        expression: Expression text to inspect

    Returns:
        Distinct unrecognized characters, in order of first appearance
    """
    found: List[str] = []
    for ch in expression:
        if ch not in ALLOWED_CHARACTERS and ch not in found:
            found.append(ch)
    return found


def check_expression_length(expression: str) -> Tuple[bool, Optional[str]]:
    """
    Check the expression against MAX_EXPRESSION_LENGTH.

    Returns:
        (is_valid, error_message) tuple
    """
    if len(expression) > MAX_EXPRESSION_LENGTH:
        error_msg = (f"Expression is {len(expression)} characters long, "
                     f"limit is {MAX_EXPRESSION_LENGTH}")
        logger.warning(error_msg)
        return False, error_msg
    return True, None


def should_skip(expression: str) -> bool:
    """Blank input or a displayed error indicator is not evaluated."""
    return not expression.strip() or expression == ERROR_TAG


def apply_guards(expression: str) -> Tuple[bool, Optional[str]]:
    """
    Apply all guards to an expression.

    Unrecognized characters only produce a warning: the tokenizer drops
    them and evaluation proceeds, but a typo such as a letter is likely
    the cause of a confusing downstream error.

    Returns:
        (passed, error_message) tuple
    """
    logger.debug(f"Applying guards to expression: '{expression[:100]}'")

    is_valid, error = check_expression_length(expression)
    if not is_valid:
        logger.warning(f"Guard check failed: {error}")
        return False, error

    unrecognized = find_unrecognized_characters(expression)
    if unrecognized:
        logger.warning(
            f"Ignoring unrecognized characters {unrecognized} in '{expression[:50]}'")

    logger.debug("All guard checks passed")
    return True, None
