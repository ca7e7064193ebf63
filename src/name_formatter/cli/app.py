from __future__ import annotations

import typer

from name_formatter.cli.commands import (
    format_command,
    formats_command,
    list_command,
    tokens_command,
)

app = typer.Typer(
    name="name-formatter",
    help="Format structured human names and name lists",
    add_completion=False,
)

app.command("format")(format_command)
app.command("list")(list_command)
app.command("formats")(formats_command)
app.command("tokens")(tokens_command)


def main():
    app()


if __name__ == "__main__":
    main()
