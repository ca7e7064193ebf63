"""
Name and name-list formatting.

``format_name`` walks a compiled FormatPattern over a NameComponents record;
``format_list`` joins several formatted names. Both are pure functions of
their arguments. ``NameFormatter`` binds them to a NameConfig so callers can
work with format identifiers instead of compiled patterns.
"""

from __future__ import annotations

import unicodedata
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from markupsafe import Markup, escape

from name_formatter.config import DEFAULT_ID, DEFAULT_SETTINGS, NameConfig
from name_formatter.entities.components import NameComponents
from name_formatter.entities.list_spec import Conjunction, ListFormatSpec
from name_formatter.logging import get_logger
from name_formatter.parser.pattern import (
    ComponentToken,
    ConditionalToken,
    FormatPattern,
    GroupToken,
    LiteralToken,
    SeparatorToken,
    Token,
    compile_pattern,
)
from name_formatter.render.markup import (
    FormattedName,
    Hyperlink,
    MarkupMode,
    PlainText,
    is_markup,
)

log = get_logger(__name__)

ComponentsLike = Union[NameComponents, Mapping[str, Any], None]

CONJUNCTION_TEXT = "and"
CONJUNCTION_SYMBOL = "&"

# A rendered piece: (component kind or None for literal text, text)
Fragment = Tuple[Optional[str], str]


# -----------------------------------------------------------------------------
# Fragment helpers
# -----------------------------------------------------------------------------

def _text(fragments: Sequence[Fragment]) -> str:
    return "".join(text for _, text in fragments)


def _first_grapheme(value: str) -> str:
    """
    First user-perceived character of ``value``: a base character plus any
    combining marks after it, NFC-normalized.

    Only combining marks are grouped. Emoji ZWJ sequences, regional
    indicator pairs and decomposed Hangul jamo are cut after their first
    code point.
    """
    value = value.lstrip()
    if not value:
        return ""
    out = value[0]
    for char in value[1:]:
        if not unicodedata.combining(char):
            break
        out += char
    return unicodedata.normalize("NFC", out)


def _apply_modifier(fragments: List[Fragment], modifier: str) -> List[Fragment]:
    if not fragments:
        return fragments

    if modifier == "L":
        return [(kind, text.lower()) for kind, text in fragments]
    if modifier == "U":
        return [(kind, text.upper()) for kind, text in fragments]
    if modifier == "G":
        return [
            (kind, " ".join(w[:1].upper() + w[1:] for w in text.split(" ")))
            for kind, text in fragments
        ]
    if modifier == "F":
        out = list(fragments)
        for idx, (kind, text) in enumerate(out):
            if text:
                out[idx] = (kind, text[:1].upper() + text[1:])
                break
        return out
    if modifier == "T":
        out = list(fragments)
        out[0] = (out[0][0], out[0][1].lstrip())
        out[-1] = (out[-1][0], out[-1][1].rstrip())
        return out

    # B / D pick a single word, so the group collapses into one fragment.
    words = _text(fragments).split()
    if not words:
        return []
    kind = fragments[0][0] if len(fragments) == 1 else None
    return [(kind, words[0] if modifier == "B" else words[-1])]


def _apply_modifiers(fragments: List[Fragment], modifiers: str) -> List[Fragment]:
    for modifier in modifiers:
        fragments = _apply_modifier(fragments, modifier)
    return fragments


# -----------------------------------------------------------------------------
# Token rendering
# -----------------------------------------------------------------------------

def _render_component(token: ComponentToken, components: NameComponents) -> List[Fragment]:
    value = components.get(token.kind)
    if not value:
        return []
    if token.initial:
        initial = _first_grapheme(value)
        if token.suffix:
            initial = initial.upper() + token.suffix
        value = initial
    return [(token.kind, value)]


def _render_value(token: Token, components: NameComponents, settings: Mapping[str, Any]) -> List[Fragment]:
    if isinstance(token, ConditionalToken):
        return _render_value(token.token, components, settings)

    if isinstance(token, ComponentToken):
        fragments = _render_component(token, components)
    elif isinstance(token, SeparatorToken):
        sep = settings.get(token.setting)
        fragments = [(None, str(sep))] if sep else []
    elif isinstance(token, LiteralToken):
        fragments = [(None, token.text)]
    else:
        fragments = _render_sequence(token.tokens, components, settings)

    return _apply_modifiers(fragments, token.modifiers)


def _conditions_hold(conditions: str, left: str, right: str) -> bool:
    for condition in conditions:
        if condition == "+" and not (left and right):
            return False
        if condition == "-" and not left:
            return False
        if condition == "~" and not right:
            return False
        if condition == "^" and right:
            return False
        if condition == "|" and left:
            return False
    return True


def _render_sequence(
    tokens: Sequence[Token],
    components: NameComponents,
    settings: Mapping[str, Any],
) -> List[Fragment]:
    values = [_render_value(token, components, settings) for token in tokens]
    out: List[Fragment] = []

    for idx, token in enumerate(tokens):
        if isinstance(token, ConditionalToken):
            left = _text(out)
            right = _text(values[idx + 1]) if idx + 1 < len(values) else ""
            if not _conditions_hold(token.conditions, left, right):
                continue
        out.extend(values[idx])

    return [frag for frag in out if frag[1]]


def _to_markup(fragments: Sequence[Fragment], mode: MarkupMode) -> FormattedName:
    if mode is MarkupMode.NONE:
        return PlainText(_text(fragments))
    if mode is MarkupMode.RAW:
        return Markup(_text(fragments))
    if mode is MarkupMode.SIMPLE:
        return escape(_text(fragments))

    out = Markup("")
    for kind, text in fragments:
        if kind:
            out += Markup('<span class="name-{}">{}</span>').format(kind, text)
        else:
            out += escape(text)
    return out


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def _as_components(value: ComponentsLike) -> NameComponents:
    if isinstance(value, NameComponents):
        return value
    return NameComponents.from_mapping(value)


def _merged_settings(settings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    return {**DEFAULT_SETTINGS, **(settings or {})}


def format_name(
    components: ComponentsLike,
    pattern: Union[FormatPattern, str],
    settings: Optional[Mapping[str, Any]] = None,
) -> FormattedName:
    """
    Render one name through a compiled pattern.

    Empty components always give ``PlainText("")``, whatever literals the
    pattern contains. A link wraps the whole result in a Hyperlink. Settings
    are checked before anything is rendered, so an unknown ``markup`` value
    raises InvalidSettingError even for an empty name.
    """
    components = _as_components(components)
    if isinstance(pattern, str):
        pattern = compile_pattern(pattern)
    cfg = _merged_settings(settings)
    mode = MarkupMode.parse(cfg.get("markup"))
    if components.is_empty():
        return PlainText("")

    fragments = _render_sequence(pattern.tokens, components, cfg)
    result = _to_markup(fragments, mode)

    if components.link and str(result):
        return Hyperlink(url=components.link, content=result)
    return result


def _last_boundary(spec: ListFormatSpec, count: int) -> str:
    if spec.conjunction is Conjunction.INHERIT:
        return spec.delimiter

    word = CONJUNCTION_TEXT if spec.conjunction is Conjunction.TEXT else CONJUNCTION_SYMBOL
    if spec.delimiter_before_last(count):
        return f"{spec.delimiter}{word} "
    return f" {word} "


def _join(parts: Sequence[Union[str, FormattedName]], separators: Sequence[str]) -> FormattedName:
    """Interleave parts with separators, staying in markup when any part is markup."""
    if any(is_markup(p) for p in parts):
        out = Markup("")
        for idx, part in enumerate(parts):
            if idx:
                out += escape(separators[idx - 1])
            out += escape(part)
        return out

    pieces: List[str] = []
    for idx, part in enumerate(parts):
        if idx:
            pieces.append(separators[idx - 1])
        pieces.append(str(part))
    return PlainText("".join(pieces))


def format_list(
    items: Iterable[ComponentsLike],
    name_pattern: Union[FormatPattern, str],
    list_spec: ListFormatSpec,
    settings: Optional[Mapping[str, Any]] = None,
) -> FormattedName:
    """
    Join several formatted names.

    Entries that format to "" keep their position. When the list is
    truncated, entries past ``et_al_first`` are never formatted.
    """
    MarkupMode.parse(_merged_settings(settings).get("markup"))
    items = list(items)
    count = len(items)
    if count == 0:
        return PlainText("")
    if count == 1:
        return format_name(items[0], name_pattern, settings)

    if list_spec.truncates(count):
        kept = [format_name(c, name_pattern, settings) for c in items[: list_spec.et_al_first]]
        separators = [list_spec.delimiter] * len(kept)
        return _join([*kept, list_spec.et_al], separators)

    names = [format_name(c, name_pattern, settings) for c in items]
    separators = [list_spec.delimiter] * (count - 2) + [_last_boundary(list_spec, count)]
    return _join(names, separators)


class NameFormatter:
    """
    Formats names and name lists using identifiers from a NameConfig.

    Settings start from the config's ``settings`` section and may be changed
    per instance with ``set_setting``.
    """

    def __init__(self, config: NameConfig):
        self.config = config
        self._settings: Dict[str, Any] = dict(config.settings)

    def get_setting(self, key: str) -> Any:
        return self._settings.get(key)

    def set_setting(self, key: str, value: Any) -> "NameFormatter":
        if key == "markup":
            value = MarkupMode.parse(value).value
        self._settings[key] = value
        return self

    @property
    def settings(self) -> Dict[str, Any]:
        return dict(self._settings)

    def pattern(self, format_id: str = DEFAULT_ID) -> FormatPattern:
        return compile_pattern(self.config.pattern_for(format_id))

    def format(
        self,
        components: ComponentsLike,
        format_id: str = DEFAULT_ID,
        pattern: Optional[str] = None,
    ) -> FormattedName:
        compiled = compile_pattern(pattern) if pattern is not None else self.pattern(format_id)
        return format_name(components, compiled, self._settings)

    def format_list(
        self,
        items: Iterable[ComponentsLike],
        format_id: str = DEFAULT_ID,
        list_format_id: str = DEFAULT_ID,
    ) -> FormattedName:
        spec = self.config.list_format_for(list_format_id)
        return format_list(items, self.pattern(format_id), spec, self._settings)

    def last_delimiter_types(self, include_examples: bool = True) -> Dict[str, str]:
        if not include_examples:
            return {
                "text": "Textual",
                "symbol": "Ampersand",
                "inherit": "Inherit delimiter",
            }
        return {
            "text": f"Textual ({CONJUNCTION_TEXT})",
            "symbol": f"Ampersand ({CONJUNCTION_SYMBOL})",
            "inherit": "Inherit delimiter",
        }

    def last_delimiter_behaviors(self, include_examples: bool = True) -> Dict[str, str]:
        if not include_examples:
            return {
                "never": "Never",
                "always": "Always",
                "contextual": "Contextual",
            }
        return {
            "never": 'Never (i.e. "J. Doe and T. Williams")',
            "always": 'Always (i.e. "J. Doe, and T. Williams")',
            "contextual": 'Contextual (i.e. "J. Doe and T. Williams" or "J. Doe, S. Smith, and T. Williams")',
        }
