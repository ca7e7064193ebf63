from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from name_formatter.cli.utils import build_formatter, console, fail
from name_formatter.core.exceptions import NameFormatterError

SAMPLE_NAMES = [
    {"title": "Dr.", "given": "John", "middle": "Michael", "family": "Smith", "generational": "Jr.", "credentials": "PhD"},
    {"title": "Prof.", "given": "Jane", "family": "Doe", "credentials": "MD"},
    {"title": "Mr.", "given": "Bob", "family": "Johnson"},
]


def formats_command(
    config: Optional[Path] = typer.Option(None, "--config", exists=True, readable=True, help="Alternate YAML config"),
):
    """
    List configured name and list formats with a sample rendering.
    """
    try:
        formatter = build_formatter(config)
        cfg = formatter.config

        names = Table(title="Name formats")
        names.add_column("ID", style="bold")
        names.add_column("Label")
        names.add_column("Pattern")
        names.add_column("Example")
        for format_id in cfg.formats:
            names.add_row(
                format_id,
                cfg.label_for("formats", format_id),
                cfg.pattern_for(format_id),
                str(formatter.format(SAMPLE_NAMES[0], format_id)),
            )

        lists = Table(title="List formats")
        lists.add_column("ID", style="bold")
        lists.add_column("Label")
        lists.add_column("Example")
        for list_format_id in cfg.list_formats:
            lists.add_row(
                list_format_id,
                cfg.label_for("list_formats", list_format_id),
                str(formatter.format_list(SAMPLE_NAMES, "formal", list_format_id)),
            )
    except NameFormatterError as exc:
        fail(exc)
        return

    console.print(names)
    console.print(lists)
