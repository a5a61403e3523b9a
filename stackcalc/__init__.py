"""stackcalc — arithmetic expression evaluator.

Tokenizes one expression into a linked stack and evaluates it by
precedence climbing, in 32-bit floating point. Supports + - * /, unary
minus, parentheses and decimal literals.

Usage:
    python -m stackcalc "2 * (3 + 4)"        # prints 14
    python -m stackcalc --tokens "1.5 + 2"   # show the token stream too
"""

from stackcalc.evaluator import calculate, evaluate
from stackcalc.models import ExpressionError, Token, TokenKind
from stackcalc.stack import Stack
from stackcalc.tokenizer import tokenize

__all__ = [
    "ExpressionError",
    "Stack",
    "Token",
    "TokenKind",
    "calculate",
    "evaluate",
    "tokenize",
]
