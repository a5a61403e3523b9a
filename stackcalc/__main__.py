"""CLI for stackcalc.

Usage:
    python -m stackcalc "1 + 2 * 3"            # Evaluate, print result
    python -m stackcalc "-3 + 4"               # Leading minus is fine
    python -m stackcalc --tokens "2 * (3+4)"   # Also show the token stream
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from stackcalc.evaluator import evaluate
from stackcalc.models import ExpressionError, Token, format_number
from stackcalc.stack import Stack
from stackcalc.tokenizer import tokenize

app = typer.Typer(
    name="stackcalc",
    help="Evaluate an arithmetic expression",
    add_completion=False,
)
console = Console(stderr=True)


def render_tokens(tokens: Stack[Token], console: Console) -> None:
    """Print the token stream as a table, in evaluation order."""
    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="green")
    table.add_column("Token", justify="right")

    for i, token in enumerate(tokens, start=1):
        table.add_row(str(i), token.kind.name, str(token))

    console.print(table)


@app.command(context_settings={"ignore_unknown_options": True})
def cmd_eval(
    expression: Optional[str] = typer.Argument(None, help="Expression, e.g. '2 * (3 + 4)'"),
    show_tokens: bool = typer.Option(False, "--tokens", "-t", help="Print the token stream to stderr"),
) -> None:
    """Evaluate EXPRESSION and print the result."""
    if expression is None:
        console.print("[red]expected expression![/red]")
        raise typer.Exit(1)

    try:
        tokens = tokenize(expression)
        if show_tokens:
            render_tokens(tokens, console)
        result = evaluate(tokens)
    except ExpressionError as e:
        console.print(str(e), style="red", markup=False, highlight=False)
        raise typer.Exit(1)

    typer.echo(format_number(result))


if __name__ == "__main__":
    app()
