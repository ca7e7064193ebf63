"""
Result types for formatted names.

A formatted name is one of:

* ``PlainText``   - text with no markup; escapes itself when composed into HTML
* ``EscapedText`` - ``markupsafe.Markup`` that is already safe to embed
* ``Hyperlink``   - a name wrapped in an anchor pointing at ``url``

All three implement ``__html__`` so callers can hand them to markupsafe or a
Jinja2 template without concatenating raw markup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from markupsafe import Markup, escape

from name_formatter.core.exceptions import InvalidSettingError


class MarkupMode(str, Enum):
    NONE = "none"        # plain text
    SIMPLE = "simple"    # escaped text
    HTML = "html"        # escaped text, components wrapped in <span>
    RAW = "raw"          # trusted text, not escaped

    @classmethod
    def parse(cls, value: object) -> "MarkupMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise InvalidSettingError(
                f"Unknown markup mode {value!r}; expected one of: {allowed}"
            ) from None


class PlainText(str):
    """Formatted text without markup."""

    __slots__ = ()

    def __html__(self) -> Markup:
        return escape(str(self))


EscapedText = Markup


@dataclass(frozen=True)
class Hyperlink:
    url: str
    content: Union[PlainText, Markup]

    def __html__(self) -> Markup:
        return Markup('<a href="{}">{}</a>').format(self.url, self.content)

    def __str__(self) -> str:
        return str(self.__html__())

    @property
    def text(self) -> str:
        """The visible link text with any markup removed."""
        if isinstance(self.content, Markup):
            return self.content.striptags()
        return str(self.content)


FormattedName = Union[PlainText, Markup, Hyperlink]


def is_markup(value: object) -> bool:
    return isinstance(value, (Markup, Hyperlink))
