# src/name_formatter/parser/__init__.py

"""
Public interface for the pattern compiler.

    from name_formatter.parser import compile_pattern, FormatPattern
"""

from __future__ import annotations

from .pattern import (
    ComponentToken,
    ConditionalToken,
    FormatPattern,
    GroupToken,
    LiteralToken,
    SeparatorToken,
    Token,
    compile_pattern,
)

__all__ = [
    "ComponentToken",
    "ConditionalToken",
    "FormatPattern",
    "GroupToken",
    "LiteralToken",
    "SeparatorToken",
    "Token",
    "compile_pattern",
]
