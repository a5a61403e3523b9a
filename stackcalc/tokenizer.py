"""Turn expression text into a token stack.

The returned stack pops tokens in the same left-to-right order they appear
in the text.
"""

from __future__ import annotations

import numpy as np

from stackcalc.models import TEN, ZERO, ExpressionError, Number, SYMBOLS, Token
from stackcalc.stack import Stack

_DIGITS = "0123456789"
_WHITESPACE = " \t\n\r"


def _scan_number(expression: str, pos: int) -> tuple[Token, int]:
    """Scan a digit/point run starting at pos.

    Every digit after the first point counts as a fractional place, so
    '1.2.3' reads as 1.23. Returns (token, position after the run).
    """
    result = ZERO
    place = 0
    radix = False

    with np.errstate(over="ignore"):
        while pos < len(expression):
            char = expression[pos]
            if char in _DIGITS:
                result = result * TEN + Number(ord(char) - ord("0"))
                if radix:
                    place += 1
            elif char == ".":
                radix = True
            else:
                break
            pos += 1

        if radix:
            result = result / Number(TEN ** place)

    return Token.number(result), pos


def tokenize(expression: str) -> Stack[Token]:
    """Tokenize an expression.

    Raises ExpressionError on the first character that is not a digit,
    operator, paren or whitespace. No partial result is returned.
    """
    tokens: Stack[Token] = Stack()
    pos = 0
    while pos < len(expression):
        char = expression[pos]
        if char in _DIGITS:
            token, pos = _scan_number(expression, pos)
            tokens.push(token)
        elif char in SYMBOLS:
            tokens.push(Token.symbol(char))
            pos += 1
        elif char in _WHITESPACE:
            pos += 1
        else:
            raise ExpressionError(f"invalid character {char}")
    return tokens.reversed()
