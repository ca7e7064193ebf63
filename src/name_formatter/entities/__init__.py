"""
Name entities for ``name_formatter``.
"""

from .components import COMPONENT_KINDS, NameComponents
from .list_spec import Conjunction, DelimiterBehavior, ListFormatSpec

__all__ = [
    "COMPONENT_KINDS",
    "Conjunction",
    "DelimiterBehavior",
    "ListFormatSpec",
    "NameComponents",
]
