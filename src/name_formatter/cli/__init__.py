"""
CLI package for name_formatter.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from name_formatter.cli.app import app, main

__all__ = [
    "app",
    "main",
]
