from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from name_formatter.cli.utils import build_formatter, console, fail, read_items
from name_formatter.core.exceptions import NameFormatterError


def list_command(
    names: Path = typer.Argument(..., exists=True, readable=True, help="JSON array of name components"),
    format_id: str = typer.Option("default", "--format", help="Name format identifier"),
    list_format_id: str = typer.Option("default", "--list-format", "-l", help="List format identifier"),
    markup: Optional[str] = typer.Option(None, "--markup", help="none, simple, html or raw"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, readable=True, help="Alternate YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Format a list of names read from a JSON file.
    """
    try:
        items = read_items(names)
        formatter = build_formatter(config, markup=markup, verbose=verbose)
        result = formatter.format_list(items, format_id, list_format_id)
    except NameFormatterError as exc:
        fail(exc)
        return

    if verbose:
        console.log(f"Formatted {len(items)} names")
    console.print(str(result), markup=False, highlight=False)
