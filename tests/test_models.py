"""Tests for Token properties, operator semantics and number formatting."""

import numpy as np
import pytest

from stackcalc.models import ExpressionError, Number, Token, TokenKind, format_number

PLUS = Token.symbol("+")
MINUS = Token.symbol("-")
TIMES = Token.symbol("*")
DIVIDE = Token.symbol("/")
LEFT = Token.symbol("(")
RIGHT = Token.symbol(")")


# --- Derived properties ---

def test_precedence():
    assert TIMES.precedence == DIVIDE.precedence == 2
    assert PLUS.precedence == MINUS.precedence == 1
    assert LEFT.precedence == RIGHT.precedence == Token.number(1).precedence == 0


def test_binary_and_unary_flags():
    assert [t.is_binary for t in (PLUS, MINUS, TIMES, DIVIDE, LEFT, RIGHT)] == [
        True, True, True, True, False, False,
    ]
    assert [t.is_unary for t in (PLUS, MINUS, TIMES, DIVIDE)] == [True, True, False, False]
    assert not Token.number(3).is_unary


def test_symbol_rejects_other_characters():
    with pytest.raises(KeyError):
        Token.symbol("%")


# --- Binary semantics ---

def test_binary_apply():
    a, b = Number(6), Number(4)
    assert PLUS.binary_apply(a, b) == 10
    assert MINUS.binary_apply(a, b) == 2
    assert TIMES.binary_apply(a, b) == 24
    assert DIVIDE.binary_apply(a, b) == 1.5


def test_binary_apply_stays_float32():
    assert isinstance(PLUS.binary_apply(Number(1), Number(2)), np.float32)


def test_division_by_zero():
    with pytest.raises(ExpressionError, match="division by zero"):
        DIVIDE.binary_apply(Number(1), Number(0))


def test_overflow_is_unchecked():
    big = Number(3e38)
    assert np.isinf(TIMES.binary_apply(big, big))


@pytest.mark.parametrize("token", [LEFT, RIGHT, Token.number(2)])
def test_invalid_binary_operator(token):
    with pytest.raises(ExpressionError, match="invalid binary operator"):
        token.binary_apply(Number(1), Number(2))


# --- Unary semantics ---

def test_unary_apply():
    assert PLUS.unary_apply(Number(3)) == 3
    assert MINUS.unary_apply(Number(3)) == -3


@pytest.mark.parametrize("token", [TIMES, DIVIDE, LEFT])
def test_invalid_unary_operator(token):
    with pytest.raises(ExpressionError, match="invalid unary operator"):
        token.unary_apply(Number(1))


# --- Display ---

def test_token_display():
    assert [str(t) for t in (PLUS, MINUS, TIMES, DIVIDE, LEFT, RIGHT)] == list("+-*/()")
    assert str(Token.number(2.5)) == "2.5"


@pytest.mark.parametrize(
    "value, text",
    [(14, "14"), (3.75, "3.75"), (-5, "-5"), (0.1, "0.1"), (float("inf"), "inf")],
)
def test_format_number(value, text):
    assert format_number(Number(value)) == text


def test_format_nan():
    assert format_number(Number("nan")) == "NaN"


def test_overflowing_literals_cancel_to_nan():
    from stackcalc.evaluator import calculate

    huge = "9" * 50
    assert format_number(calculate(f"{huge} - {huge}")) == "NaN"


def test_error_is_arithmetic_error():
    assert issubclass(ExpressionError, ArithmeticError)
