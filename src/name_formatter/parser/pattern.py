# src/name_formatter/parser/pattern.py

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple, Union

from name_formatter.core.exceptions import InvalidPatternError
from name_formatter.logging import get_logger

log = get_logger(__name__)


# -----------------------------------------------------------------------------
# Pattern alphabet
# -----------------------------------------------------------------------------

COMPONENT_CODES = {
    "t": "title",
    "g": "given",
    "m": "middle",
    "f": "family",
    "s": "generational",
    "c": "credentials",
}

# First letter of a component, emitted as-is.
INITIAL_CODES = {
    "x": "given",
    "y": "middle",
    "z": "family",
}

SEPARATOR_CODES = {
    "i": "sep1",
    "j": "sep2",
    "k": "sep3",
}

# Prefix modifiers applied to the rendered text of the next token.
MODIFIERS = "LUFGTBD"

# Prefix conditions deciding whether the next token is emitted at all.
CONDITIONS = "+-~^|"

INITIALIZE_SUFFIX = "*"
ESCAPE = "\\"
GROUP_OPEN = "("
GROUP_CLOSE = ")"


# -----------------------------------------------------------------------------
# Tokens
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentToken:
    """
    A reference to one name component.

    Attributes:
        kind: Component name, e.g. "given".
        initial: Render only the first grapheme.
        suffix: Text appended to the initial ("." for the ``*`` modifier).
        modifiers: Case/trim modifiers, applied in order.
    """
    kind: str
    initial: bool = False
    suffix: str = ""
    modifiers: str = ""


@dataclass(frozen=True)
class SeparatorToken:
    """A separator resolved from the formatter settings (sep1/sep2/sep3)."""
    setting: str
    modifiers: str = ""


@dataclass(frozen=True)
class LiteralToken:
    """Fixed text emitted verbatim."""
    text: str
    modifiers: str = ""


@dataclass(frozen=True)
class GroupToken:
    """A parenthesised sub-pattern that renders to a single value."""
    tokens: Tuple["Token", ...]
    modifiers: str = ""


ValueToken = Union[ComponentToken, SeparatorToken, LiteralToken, GroupToken]


@dataclass(frozen=True)
class ConditionalToken:
    """
    A token emitted only when its neighbours satisfy every condition.

    The left neighbour is the output already produced in the enclosing
    group; the right neighbour is the value of the following token.
    """
    conditions: str
    token: ValueToken


Token = Union[ComponentToken, SeparatorToken, LiteralToken, GroupToken, ConditionalToken]


@dataclass(frozen=True)
class FormatPattern:
    source: str
    tokens: Tuple[Token, ...]

    def __len__(self) -> int:
        return len(self.tokens)


# -----------------------------------------------------------------------------
# Compiler
# -----------------------------------------------------------------------------

class _Frame:
    """One nesting level of the compiler (the root or an open group)."""

    def __init__(self, position: int, modifiers: str = "", conditions: str = ""):
        self.position = position
        self.modifiers = modifiers
        self.conditions = conditions
        self.tokens: List[Token] = []
        self.pending_modifiers = ""
        self.pending_conditions = ""
        # Index of the literal run still accepting characters, if any.
        self.open_literal: Optional[int] = None

    def has_pending(self) -> bool:
        return bool(self.pending_modifiers or self.pending_conditions)

    def push(self, token: ValueToken) -> None:
        if self.pending_conditions:
            self.tokens.append(ConditionalToken(self.pending_conditions, token))
        else:
            self.tokens.append(token)
        self.pending_modifiers = ""
        self.pending_conditions = ""
        self.open_literal = None

    def push_literal(self, char: str) -> None:
        if self.open_literal is not None and not self.has_pending():
            idx = self.open_literal
            current = self.tokens[idx]
            if isinstance(current, ConditionalToken):
                assert isinstance(current.token, LiteralToken)
                lit = current.token
                self.tokens[idx] = ConditionalToken(
                    current.conditions, LiteralToken(lit.text + char, lit.modifiers)
                )
            else:
                assert isinstance(current, LiteralToken)
                self.tokens[idx] = LiteralToken(current.text + char, current.modifiers)
            return

        self.push(LiteralToken(char, self.pending_modifiers))
        self.open_literal = len(self.tokens) - 1


def _initialize_last(frame: _Frame, pattern: str, pos: int) -> None:
    """Apply the ``*`` suffix to the component token just compiled."""
    if frame.has_pending() or not frame.tokens or frame.open_literal is not None:
        raise InvalidPatternError(
            f"{INITIALIZE_SUFFIX!r} must follow a component code", pattern, pos
        )

    last = frame.tokens[-1]
    wrapper: Optional[ConditionalToken] = None
    if isinstance(last, ConditionalToken):
        wrapper, last = last, last.token

    if not isinstance(last, ComponentToken) or last.initial:
        raise InvalidPatternError(
            f"{INITIALIZE_SUFFIX!r} must follow a component code", pattern, pos
        )

    initialized = ComponentToken(last.kind, initial=True, suffix=".", modifiers=last.modifiers)
    frame.tokens[-1] = (
        ConditionalToken(wrapper.conditions, initialized) if wrapper else initialized
    )


def _compile(pattern: str) -> FormatPattern:
    stack: List[_Frame] = [_Frame(position=0)]
    pos = 0

    while pos < len(pattern):
        char = pattern[pos]
        frame = stack[-1]

        if char == ESCAPE:
            if pos + 1 >= len(pattern):
                raise InvalidPatternError("dangling escape character", pattern, pos)
            frame.push_literal(pattern[pos + 1])
            pos += 2
            continue

        if char in COMPONENT_CODES:
            frame.push(ComponentToken(COMPONENT_CODES[char], modifiers=frame.pending_modifiers))
        elif char in INITIAL_CODES:
            frame.push(
                ComponentToken(INITIAL_CODES[char], initial=True, modifiers=frame.pending_modifiers)
            )
        elif char in SEPARATOR_CODES:
            frame.push(SeparatorToken(SEPARATOR_CODES[char], modifiers=frame.pending_modifiers))
        elif char in MODIFIERS:
            frame.pending_modifiers += char
        elif char in CONDITIONS:
            frame.pending_conditions += char
        elif char == INITIALIZE_SUFFIX:
            _initialize_last(frame, pattern, pos)
        elif char == GROUP_OPEN:
            stack.append(
                _Frame(
                    position=pos,
                    modifiers=frame.pending_modifiers,
                    conditions=frame.pending_conditions,
                )
            )
            frame.pending_modifiers = ""
            frame.pending_conditions = ""
            frame.open_literal = None
        elif char == GROUP_CLOSE:
            if len(stack) == 1:
                raise InvalidPatternError("unbalanced closing parenthesis", pattern, pos)
            if frame.has_pending():
                raise InvalidPatternError("modifier or condition before ')'", pattern, pos)
            stack.pop()
            parent = stack[-1]
            parent.pending_modifiers = frame.modifiers
            parent.pending_conditions = frame.conditions
            parent.push(GroupToken(tuple(frame.tokens), modifiers=frame.modifiers))
        elif char.isascii() and char.isalpha():
            raise InvalidPatternError(f"unknown component code {char!r}", pattern, pos)
        else:
            frame.push_literal(char)

        pos += 1

    if len(stack) > 1:
        raise InvalidPatternError("unclosed parenthesis", pattern, stack[-1].position)
    if stack[0].has_pending():
        raise InvalidPatternError(
            "pattern ends with a modifier or condition", pattern, len(pattern) - 1
        )

    return FormatPattern(source=pattern, tokens=tuple(stack[0].tokens))


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> FormatPattern:
    """
    Compile a pattern string into an immutable FormatPattern.

    Examples:
        "t+if"                        -> title, sep1 if both sides set, family
        "((((t+ig)+im)+if)+is)+jc"    -> full name with credentials
        "g* m* f"                     -> "J. M. Smith"

    Raises:
        InvalidPatternError: unknown component code, unbalanced
            parentheses, dangling prefix or misplaced ``*``.
    """
    compiled = _compile(pattern)
    log.debug("Compiled pattern %r into %d tokens", pattern, len(compiled))
    return compiled
