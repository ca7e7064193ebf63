from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console

from name_formatter.config import NameConfig, get_config, load_config
from name_formatter.core.exceptions import NameFormatterError
from name_formatter.formatter import NameFormatter
from name_formatter.logging import configure_logging, set_level

console = Console()
err_console = Console(stderr=True)


def build_formatter(
    config_path: Optional[Path],
    *,
    markup: Optional[str] = None,
    verbose: bool = False,
) -> NameFormatter:
    """
    Load configuration and return a NameFormatter ready for CLI use.
    """
    cfg: NameConfig = load_config(config_path) if config_path else get_config()
    configure_logging(cfg)
    if verbose:
        set_level(logging.DEBUG)

    formatter = NameFormatter(cfg)
    if markup:
        formatter.set_setting("markup", markup)

    if verbose:
        console.log(f"Loaded {len(cfg.formats)} name formats, {len(cfg.list_formats)} list formats")
    return formatter


def read_items(path: Path) -> List[Any]:
    """
    Read a JSON array of component mappings.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid JSON: {exc}") from exc
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise typer.BadParameter(f"{path} must contain a JSON array of names")
    return data


def fail(exc: NameFormatterError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(code=1)
