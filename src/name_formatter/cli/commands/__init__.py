"""
CLI command modules for name_formatter.

Each command module defines a single Typer-compatible command function.
"""

from name_formatter.cli.commands.format_list import list_command
from name_formatter.cli.commands.format_name import format_command
from name_formatter.cli.commands.formats import formats_command
from name_formatter.cli.commands.tokens import tokens_command

__all__ = [
    "format_command",
    "formats_command",
    "list_command",
    "tokens_command",
]
