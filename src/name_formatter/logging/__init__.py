"""
Logging package for ``name_formatter``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import configure_logging, get_logger, set_level

__all__ = [
    "configure_logging",
    "get_logger",
    "set_level",
]
