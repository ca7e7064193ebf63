# tests/test_pattern.py

from __future__ import annotations

import pytest

from name_formatter.core.exceptions import InvalidPatternError
from name_formatter.parser import (
    ComponentToken,
    ConditionalToken,
    GroupToken,
    LiteralToken,
    SeparatorToken,
    compile_pattern,
)
from name_formatter.parser.pattern import _compile


def test_compile_conditional_joiner() -> None:
    compiled = compile_pattern("t+if")
    assert compiled.source == "t+if"
    assert compiled.tokens == (
        ComponentToken("title"),
        ConditionalToken("+", SeparatorToken("sep1")),
        ComponentToken("family"),
    )


def test_compile_is_deterministic() -> None:
    pattern = "((((t+ig)+im)+if)+is)+jc"
    assert _compile(pattern) == _compile(pattern)
    assert compile_pattern(pattern) == _compile(pattern)


def test_compile_groups_nest() -> None:
    compiled = compile_pattern("(t+ig)+if")
    group = compiled.tokens[0]
    assert isinstance(group, GroupToken)
    assert group.tokens[0] == ComponentToken("title")
    assert group.tokens[2] == ComponentToken("given")
    assert len(compiled.tokens) == 3


def test_literal_runs_are_merged() -> None:
    compiled = compile_pattern("f, g")
    assert compiled.tokens == (
        ComponentToken("family"),
        LiteralToken(", "),
        ComponentToken("given"),
    )


def test_conditional_literal_run() -> None:
    compiled = compile_pattern("f+, g")
    assert compiled.tokens[1] == ConditionalToken("+", LiteralToken(", "))


def test_escaped_letters_are_literal() -> None:
    compiled = compile_pattern(r"f \a\n\d g")
    assert compiled.tokens[1] == LiteralToken(" and ")


def test_initialize_suffix() -> None:
    compiled = compile_pattern("g*f")
    assert compiled.tokens[0] == ComponentToken("given", initial=True, suffix=".")


def test_initial_codes() -> None:
    compiled = compile_pattern("xyz")
    assert [t.kind for t in compiled.tokens] == ["given", "middle", "family"]
    assert all(t.initial and t.suffix == "" for t in compiled.tokens)


def test_modifiers_attach_to_next_token() -> None:
    compiled = compile_pattern("ULf+i(Fg)")
    assert compiled.tokens[0] == ComponentToken("family", modifiers="UL")
    assert compiled.tokens[1] == ConditionalToken("+", SeparatorToken("sep1"))
    group = compiled.tokens[2]
    assert isinstance(group, GroupToken)
    assert group.tokens == (ComponentToken("given", modifiers="F"),)


@pytest.mark.parametrize(
    "pattern",
    [
        "t+iq",        # unknown component code
        "((t+ig)",     # unclosed group
        "t+ig)",       # stray closing parenthesis
        "t+",          # dangling condition
        "tU",          # dangling modifier
        "(t+)",        # condition before ')'
        "*g",          # initial with nothing before it
        "i*",          # initial after a separator
        "g**",         # initial applied twice
        "g\\",         # trailing escape
    ],
)
def test_invalid_patterns_raise(pattern: str) -> None:
    with pytest.raises(InvalidPatternError):
        compile_pattern(pattern)


def test_invalid_pattern_reports_position() -> None:
    with pytest.raises(InvalidPatternError) as excinfo:
        compile_pattern("t+iq")
    assert excinfo.value.position == 3
    assert excinfo.value.pattern == "t+iq"
    assert isinstance(excinfo.value, ValueError)


def test_empty_pattern_compiles() -> None:
    assert compile_pattern("").tokens == ()
