"""Data models for stackcalc.

Number, ExpressionError, TokenKind, Token: the typed values that flow
through tokenizer → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

# All arithmetic happens in 32-bit floating point.
Number = np.float32

ZERO = Number(0.0)
TEN = Number(10.0)


class ExpressionError(ArithmeticError):
    """Raised for any tokenize or evaluate failure. The message is the diagnostic."""


class TokenKind(str, Enum):
    """Token variants. Symbol kinds carry their source character as value."""

    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    LEFT = "("
    RIGHT = ")"


SYMBOLS = {kind.value: kind for kind in TokenKind if kind is not TokenKind.NUMBER}

_BINARY = (TokenKind.PLUS, TokenKind.MINUS, TokenKind.TIMES, TokenKind.DIVIDE)
_UNARY = (TokenKind.PLUS, TokenKind.MINUS)


def format_number(value: Number) -> str:
    """Render a number in its shortest float32 form: '14', '3.75', '-5', 'inf', 'NaN'."""
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(Number(value), trim="-")


@dataclass(frozen=True)
class Token:
    """One lexical unit. ``value`` is set only for NUMBER tokens."""

    kind: TokenKind
    value: Optional[Number] = None

    @classmethod
    def number(cls, value: float) -> Token:
        return cls(TokenKind.NUMBER, Number(value))

    @classmethod
    def symbol(cls, char: str) -> Token:
        """Build the token for an operator or paren character.

        Raises KeyError for any other character.
        """
        return cls(SYMBOLS[char])

    @property
    def precedence(self) -> int:
        if self.kind in (TokenKind.TIMES, TokenKind.DIVIDE):
            return 2
        if self.kind in (TokenKind.PLUS, TokenKind.MINUS):
            return 1
        return 0

    @property
    def is_binary(self) -> bool:
        return self.kind in _BINARY

    @property
    def is_unary(self) -> bool:
        return self.kind in _UNARY

    def binary_apply(self, left: Number, right: Number) -> Number:
        """Apply this operator to two operands.

        Raises ExpressionError on a zero divisor or a non-binary token.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            if self.kind is TokenKind.PLUS:
                return left + right
            if self.kind is TokenKind.MINUS:
                return left - right
            if self.kind is TokenKind.TIMES:
                return left * right
            if self.kind is TokenKind.DIVIDE:
                if right == ZERO:
                    raise ExpressionError("division by zero")
                return left / right
        raise ExpressionError("invalid binary operator")

    def unary_apply(self, value: Number) -> Number:
        if self.kind is TokenKind.PLUS:
            return value
        if self.kind is TokenKind.MINUS:
            return -value
        raise ExpressionError("invalid unary operator")

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return format_number(self.value)
        return self.kind.value
