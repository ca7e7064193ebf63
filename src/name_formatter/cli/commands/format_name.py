from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from name_formatter.cli.utils import build_formatter, console, fail
from name_formatter.core.exceptions import NameFormatterError
from name_formatter.entities.components import NameComponents


def format_command(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Title, e.g. Dr."),
    given: Optional[str] = typer.Option(None, "--given", "-g", help="Given name"),
    middle: Optional[str] = typer.Option(None, "--middle", "-m", help="Middle name(s)"),
    family: Optional[str] = typer.Option(None, "--family", "-f", help="Family name"),
    generational: Optional[str] = typer.Option(None, "--generational", "-s", help="Generational suffix, e.g. Jr."),
    credentials: Optional[str] = typer.Option(None, "--credentials", "-c", help="Credentials, e.g. PhD"),
    link: Optional[str] = typer.Option(None, "--link", help="Wrap the name in a link to this URL"),
    format_id: str = typer.Option("default", "--format", help="Name format identifier"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Explicit pattern, overrides --format"),
    markup: Optional[str] = typer.Option(None, "--markup", help="none, simple, html or raw"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, readable=True, help="Alternate YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Format a single name.
    """
    components = NameComponents(
        title=title,
        given=given,
        middle=middle,
        family=family,
        generational=generational,
        credentials=credentials,
        link=link,
    )

    try:
        formatter = build_formatter(config, markup=markup, verbose=verbose)
        result = formatter.format(components, format_id, pattern=pattern)
    except NameFormatterError as exc:
        fail(exc)
        return

    console.print(str(result), markup=False, highlight=False)
