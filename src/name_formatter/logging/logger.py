"""
Centralized logging configuration for name_formatter.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Importing the package never reads configuration: the first ``get_logger``
  call installs a plain INFO console handler.
* ``configure_logging`` applies a loaded NameConfig: level, ``debug`` flag
  and an optional log file (``logging.file``), rotated when
  ``logging.rotate`` is set.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from name_formatter.config import NameConfig

# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "name_formatter"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_base_configured: bool = False
# Handlers installed here, so reconfiguring never removes foreign ones (pytest caplog).
_owned_handlers: list[logging.Handler] = []


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _install(base_logger: Logger, level: int, log_file: Optional[str] = None, rotate: bool = False) -> None:
    for handler in _owned_handlers:
        base_logger.removeHandler(handler)
        handler.close()
    _owned_handlers.clear()

    base_logger.setLevel(level)
    base_logger.propagate = False

    console = StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    _owned_handlers.append(console)

    if log_file:
        _owned_handlers.append(_build_file_handler(Path(log_file), level, rotate))

    for handler in _owned_handlers:
        base_logger.addHandler(handler)


def _configure_base_logger() -> Logger:
    """Install the default console setup on the shared base logger once."""
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if not _base_configured:
        _install(base_logger, logging.INFO)
        _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger that shares the project-wide handlers.

    Loggers are placed under the ``name_formatter`` hierarchy so they
    inherit the console (and optional file) handler.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger is not base_logger:
        logger.propagate = True
    return logger


def configure_logging(cfg: "NameConfig") -> Logger:
    """Apply the ``logging`` section and ``debug`` flag of a loaded config.

    Replaces the handlers installed by earlier calls; ``debug: true`` forces
    DEBUG level output.
    """
    global _base_configured

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    if cfg.debug:
        level = logging.DEBUG

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    _install(
        base_logger,
        level,
        log_file=cfg.logging.get("file"),
        rotate=bool(cfg.logging.get("rotate", False)),
    )
    _base_configured = True
    return base_logger


def set_level(level: int) -> None:
    """Override the level of the base logger and its handlers (CLI --verbose)."""
    base_logger = _configure_base_logger()
    base_logger.setLevel(level)
    for handler in _owned_handlers:
        handler.setLevel(level)
