from __future__ import annotations

import typer
from rich.table import Table

from name_formatter.cli.utils import console, fail
from name_formatter.core.exceptions import InvalidPatternError
from name_formatter.parser.pattern import (
    ComponentToken,
    ConditionalToken,
    GroupToken,
    LiteralToken,
    Token,
    compile_pattern,
)


def _describe(token: Token) -> str:
    if isinstance(token, ComponentToken):
        detail = token.kind
        if token.initial:
            detail += f" (initial{token.suffix})"
        return detail
    if isinstance(token, LiteralToken):
        return repr(token.text)
    if isinstance(token, GroupToken):
        return f"{len(token.tokens)} tokens"
    return getattr(token, "setting", "")


def _add_rows(table: Table, tokens, depth: int = 0) -> None:
    for token in tokens:
        conditions = ""
        if isinstance(token, ConditionalToken):
            conditions, token = token.conditions, token.token
        table.add_row(
            "  " * depth + type(token).__name__,
            _describe(token),
            token.modifiers,
            conditions,
        )
        if isinstance(token, GroupToken):
            _add_rows(table, token.tokens, depth + 1)


def tokens_command(
    pattern: str = typer.Argument(..., help="Pattern to compile, e.g. 't+if'"),
):
    """
    Show the compiled token stream of a pattern.
    """
    try:
        compiled = compile_pattern(pattern)
    except InvalidPatternError as exc:
        fail(exc)
        return

    table = Table(title=f"Pattern {pattern!r}")
    table.add_column("Token", style="bold")
    table.add_column("Value")
    table.add_column("Modifiers")
    table.add_column("Conditions")
    _add_rows(table, compiled.tokens)

    console.print(table)
