"""Tests for input guards."""
import logging
import pytest
from rpncalc.config import ERROR_TAG, MAX_EXPRESSION_LENGTH
from rpncalc.guards.policy import (
    apply_guards,
    check_expression_length,
    find_unrecognized_characters,
    should_skip,
)


def test_find_unrecognized_characters():
    """Test that dropped characters are reported once, in order."""
    assert find_unrecognized_characters("2a+b3a") == ["a", "b"]
    assert find_unrecognized_characters("2 + (3.5 * 4)") == []
    assert find_unrecognized_characters("2^3") == ["^"]


def test_find_unrecognized_characters_agrees_with_tokenizer():
    """Test that every reported character is one the tokenizer drops."""
    from rpncalc.evaluator.tokenizer import tokenize

    expression = "٣+1a"
    unrecognized = find_unrecognized_characters(expression)
    assert unrecognized == ["٣", "a"]
    kept = "".join(t.text for t in tokenize(expression))
    assert not any(ch in kept for ch in unrecognized)


def test_check_expression_length():
    """Test the length limit."""
    ok, error = check_expression_length("1" * MAX_EXPRESSION_LENGTH)
    assert ok is True
    assert error is None

    ok, error = check_expression_length("1" * (MAX_EXPRESSION_LENGTH + 1))
    assert ok is False
    assert "limit" in error


def test_should_skip():
    """Test that blank input and the error indicator are not evaluated."""
    assert should_skip("") is True
    assert should_skip("   ") is True
    assert should_skip(ERROR_TAG) is True
    assert should_skip("0") is False
    assert should_skip("2+2") is False


def test_apply_guards_passes_valid_expression():
    """Test that a normal expression passes."""
    passed, error = apply_guards("2+3*4")
    assert passed is True
    assert error is None


def test_apply_guards_warns_on_unrecognized_characters(caplog):
    """Test that typos are flagged but do not block evaluation."""
    with caplog.at_level(logging.WARNING, logger="rpncalc.guards.policy"):
        passed, error = apply_guards("2+x3")
    assert passed is True
    assert error is None
    assert "unrecognized" in caplog.text
    assert "'x'" in caplog.text


def test_apply_guards_refuses_overlong_expression():
    """Test that an overlong expression fails the guards."""
    passed, error = apply_guards("1+" * MAX_EXPRESSION_LENGTH + "1")
    assert passed is False
    assert error is not None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
