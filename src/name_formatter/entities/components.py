"""
components.py
Structured representation of a single human name.

Defines:
- NameComponents: title / given / middle / family / generational / credentials
                  plus an optional link target

Rules:
- Every component is optional; None or whitespace-only means "omit"
- The link never counts towards emptiness
- Records are immutable and created per formatting call
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple


COMPONENT_KINDS: Tuple[str, ...] = (
    "title",
    "given",
    "middle",
    "family",
    "generational",
    "credentials",
)

# Keys accepted for the link target when building from a mapping.
_LINK_KEYS = ("link", "url")


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def _coerce_scalar(value: Any) -> Optional[str]:
    """
    Coerce form-style input into a component string.

    Booleans follow the usual form conventions (True -> "1", False -> "").
    Containers are not valid component values and collapse to None.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


# -----------------------------------------------------------------------------
# Data model
# -----------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NameComponents:
    title: Optional[str] = None
    given: Optional[str] = None
    middle: Optional[str] = None
    family: Optional[str] = None
    generational: Optional[str] = None       # e.g., "Jr.", "III"
    credentials: Optional[str] = None        # e.g., "PhD"

    link: Optional[str] = None               # display URL, wraps the whole name

    def __post_init__(self) -> None:
        # Non-string values go through the same coercion as from_mapping.
        for field_name in (*COMPONENT_KINDS, "link"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                object.__setattr__(self, field_name, _coerce_scalar(value))

    def get(self, kind: str) -> str:
        """Return the value of a component, or "" when it is absent."""
        if kind not in COMPONENT_KINDS:
            raise KeyError(kind)
        value = getattr(self, kind)
        if _is_blank(value):
            return ""
        return value

    def is_empty(self) -> bool:
        return all(_is_blank(getattr(self, kind)) for kind in COMPONENT_KINDS)

    def to_dict(self) -> Dict[str, str]:
        out = {kind: getattr(self, kind) or "" for kind in COMPONENT_KINDS}
        if self.link:
            out["link"] = self.link
        return out

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "NameComponents":
        """
        Build components from loosely typed input (form values, JSON, YAML).

        Unknown keys are ignored. Never raises for odd values; anything that
        cannot be a component becomes empty.
        """
        if not data:
            return cls()

        values: Dict[str, Optional[str]] = {}
        for kind in COMPONENT_KINDS:
            values[kind] = _coerce_scalar(data.get(kind))

        link: Optional[str] = None
        for key in _LINK_KEYS:
            candidate = _coerce_scalar(data.get(key))
            if candidate:
                link = candidate.strip()
                break

        return cls(link=link, **values)
