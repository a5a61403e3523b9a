"""Precedence-climbing evaluator over a token stack.

Data flow per expression:
1. tokenize() builds a Stack[Token] in text order
2. evaluate() reads one primary as the initial left operand
3. evaluate_expression() folds binary operators into it, recursing whenever
   the operator after the right operand binds tighter
4. Leftover tokens after the top-level expression are an error

No expression tree is built. Every function pops from the shared stack, so
the stack is consumed as evaluation proceeds.
"""

from __future__ import annotations

from typing import Optional

from stackcalc.models import ExpressionError, Number, Token, TokenKind
from stackcalc.stack import Stack
from stackcalc.tokenizer import tokenize


def _evaluate_group(tokens: Stack[Token]) -> Number:
    """Evaluate the inside of a paren group, up to but not including ')'."""
    left = evaluate_primary(tokens)
    return evaluate_expression(tokens, left, 0)


def evaluate_primary(tokens: Stack[Token]) -> Number:
    """Pop and evaluate a number, a negated primary, or a paren group.

    Only '-' works as a prefix operator. A leading '+' is an unexpected token.
    """
    token = tokens.pop()
    if token is None:
        raise ExpressionError("unexpected token")

    if token.kind is TokenKind.LEFT:
        result = _evaluate_group(tokens)
        closing = tokens.pop()
        if closing is None or closing.kind is not TokenKind.RIGHT:
            raise ExpressionError("expected closing paren")
        return result
    if token.kind is TokenKind.MINUS:
        return token.unary_apply(evaluate_primary(tokens))
    if token.kind is TokenKind.NUMBER:
        return token.value
    raise ExpressionError("unexpected token")


def precedence_if_reducible(tokens: Stack[Token], minimum_precedence: int) -> Optional[int]:
    """Precedence of the next token if it is a binary operator binding tighter than minimum."""
    token = tokens.peek()
    if token is None or not token.is_binary:
        return None
    if token.precedence > minimum_precedence:
        return token.precedence
    return None


def pop_if_reducible(tokens: Stack[Token], minimum_precedence: int) -> Optional[Token]:
    """Pop the next token if it is a binary operator at or above minimum precedence."""
    token = tokens.peek()
    if token is None or not token.is_binary:
        return None
    if token.precedence >= minimum_precedence:
        return tokens.pop()
    return None


def evaluate_expression(tokens: Stack[Token], left: Number, minimum_precedence: int) -> Number:
    """Fold operators of at least minimum_precedence into left.

    Equal precedence associates left. A tighter operator after the right
    operand is folded into that operand first.
    """
    operator = pop_if_reducible(tokens, minimum_precedence)
    while operator is not None:
        right = evaluate_primary(tokens)

        higher = precedence_if_reducible(tokens, operator.precedence)
        while higher is not None:
            right = evaluate_expression(tokens, right, higher)
            higher = precedence_if_reducible(tokens, operator.precedence)

        left = operator.binary_apply(left, right)
        operator = pop_if_reducible(tokens, minimum_precedence)
    return left


def evaluate(tokens: Stack[Token]) -> Number:
    """Evaluate a whole token stream, draining it.

    Raises ExpressionError if anything is left over after the expression.
    """
    left = evaluate_primary(tokens)
    result = evaluate_expression(tokens, left, 0)
    if tokens.peek() is not None:
        raise ExpressionError("not all of expression was parsed")
    return result


def calculate(expression: str) -> Number:
    """Tokenize and evaluate one expression string."""
    return evaluate(tokenize(expression))
