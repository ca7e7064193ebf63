# tests/test_format_name.py

from __future__ import annotations

import pytest
from markupsafe import Markup

from name_formatter.core.exceptions import InvalidSettingError
from name_formatter.entities import ListFormatSpec
from name_formatter.entities.components import NameComponents
from name_formatter.formatter import format_list, format_name
from name_formatter.parser import compile_pattern
from name_formatter.render import Hyperlink, PlainText

DEFAULT_PATTERN = "((((t+ig)+im)+if)+is)+jc"

FULL = NameComponents(
    title="Dr.",
    given="John",
    middle="Michael",
    family="Smith",
    generational="Jr.",
    credentials="PhD",
)


def test_default_pattern_full_name() -> None:
    assert format_name(FULL, compile_pattern(DEFAULT_PATTERN)) == "Dr. John Michael Smith Jr., PhD"


def test_default_pattern_partial_name() -> None:
    nc = NameComponents(title="Prof.", given="Jane", family="Doe", credentials="MD")
    assert format_name(nc, DEFAULT_PATTERN) == "Prof. Jane Doe, MD"


def test_result_is_plain_text() -> None:
    result = format_name(FULL, "t+if")
    assert isinstance(result, PlainText)
    assert result == "Dr. Smith"


def test_conditional_joiner_skips_missing_title() -> None:
    nc = NameComponents(given="John", family="Smith")
    assert format_name(nc, "t+if") == "Smith"
    assert format_name(nc, "t+ig+if") == "John Smith"


def test_conditional_joiner_skips_missing_right_side() -> None:
    nc = NameComponents(title="Dr.", given="John")
    assert format_name(nc, "g+if") == "John"
    assert format_name(nc, "t+ig+if") == "Dr. John"


@pytest.mark.parametrize(
    "pattern",
    [DEFAULT_PATTERN, "t+if", "f, g", "(f) [g]", "g* m* f", "", "\\a\\b\\c"],
)
def test_empty_components_format_to_empty_string(pattern: str) -> None:
    assert format_name(NameComponents(), pattern) == ""
    assert format_name(NameComponents(link="https://example.com"), pattern) == ""


def test_literals_are_emitted_verbatim() -> None:
    nc = NameComponents(given="John", family="Smith")
    assert format_name(nc, "f, g") == "Smith, John"
    assert format_name(nc, "f+, g") == "Smith, John"
    assert format_name(NameComponents(family="Smith"), "f+, g") == "Smith"


def test_initialize_modifier() -> None:
    nc = NameComponents(given="john", middle="michael", family="Smith")
    assert format_name(nc, "g* m* f") == "J. M. Smith"
    assert format_name(nc, "((g*+im*)+if)") == "J. M. Smith"
    assert format_name(NameComponents(given="John", family="Smith"), "((g*+im*)+if)") == "J. Smith"


def test_initial_uses_first_grapheme() -> None:
    nc = NameComponents(given="e\u0301mile", family="Zola")
    assert format_name(nc, "g*+if") == "É. Zola"


def test_initial_keeps_combining_marks_only() -> None:
    decomposed = NameComponents(given="e\u0301mile")
    assert format_name(decomposed, "x") == "\u00e9"
    # A ZWJ emoji sequence is cut after its first code point.
    emoji = NameComponents(given="\U0001F469\u200d\U0001F4BB")
    assert format_name(emoji, "x") == "\U0001F469"


def test_invalid_markup_raises_before_rendering() -> None:
    with pytest.raises(InvalidSettingError):
        format_name(NameComponents(), "g", {"markup": "fancy"})
    with pytest.raises(InvalidSettingError):
        format_list([], "g", ListFormatSpec(), {"markup": "fancy"})


def test_initial_codes_without_period() -> None:
    nc = NameComponents(given="John", middle="Michael", family="Smith")
    assert format_name(nc, "xyz") == "JMS"


def test_case_modifiers() -> None:
    nc = NameComponents(given="john", family="van der berg")
    assert format_name(nc, "Ug+iLf") == "JOHN van der berg"
    assert format_name(nc, "Fg+iGf") == "John Van Der Berg"
    assert format_name(nc, "Bf") == "van"
    assert format_name(nc, "Df") == "berg"
    assert format_name(nc, "U(g+if)") == "JOHN VAN DER BERG"


def test_trim_modifier() -> None:
    nc = NameComponents(given="John", family="Smith")
    assert format_name(nc, "T( g )") == "John"


def test_other_conditions() -> None:
    family_only = NameComponents(family="Smith")
    given_only = NameComponents(given="John")
    # "|" falls back to the next token when nothing was emitted yet.
    assert format_name(family_only, "g|f") == "Smith"
    assert format_name(NameComponents(given="John", family="Smith"), "g|f") == "John"
    # "-" needs output before it, "~" needs a value after it.
    assert format_name(given_only, "g-,") == "John,"
    assert format_name(family_only, "g-,f") == "Smith"
    assert format_name(family_only, "~\\(f") == "(Smith"
    # "^" only when the following token is empty.
    assert format_name(given_only, "g^!f") == "John!"
    assert format_name(NameComponents(given="John", family="Smith"), "g^!f") == "JohnSmith"


def test_separators_come_from_settings() -> None:
    nc = NameComponents(given="John", family="Smith")
    assert format_name(nc, "f+jg") == "Smith, John"
    assert format_name(nc, "f+jg", {"sep2": " / "}) == "Smith / John"
    assert format_name(nc, "g+kf") == "JohnSmith"
    assert format_name(nc, "g+kf", {"sep3": "-"}) == "John-Smith"


def test_simple_markup_escapes() -> None:
    nc = NameComponents(given="<b>Jo</b>", family="O'Neil & Co")
    result = format_name(nc, "g+if", {"markup": "simple"})
    assert isinstance(result, Markup)
    assert result == "&lt;b&gt;Jo&lt;/b&gt; O&#39;Neil &amp; Co"


def test_html_markup_wraps_components() -> None:
    nc = NameComponents(title="Dr.", family="Smith")
    result = format_name(nc, "t+if", {"markup": "html"})
    assert result == '<span class="name-title">Dr.</span> <span class="name-family">Smith</span>'


def test_raw_markup_is_not_escaped() -> None:
    nc = NameComponents(given="<em>John</em>")
    result = format_name(nc, "g", {"markup": "raw"})
    assert isinstance(result, Markup)
    assert result == "<em>John</em>"


def test_link_wraps_name() -> None:
    nc = NameComponents(title="Prof.", given="Jane", family="Doe", link="https://example.com")
    result = format_name(nc, DEFAULT_PATTERN)
    assert isinstance(result, Hyperlink)
    assert result.url == "https://example.com"
    assert result.text == "Prof. Jane Doe"
    assert str(result) == '<a href="https://example.com">Prof. Jane Doe</a>'


def test_link_escapes_url_and_text() -> None:
    nc = NameComponents(given="A&B", link='https://example.com/?a=1&b="2"')
    result = format_name(nc, "g")
    assert str(result) == '<a href="https://example.com/?a=1&amp;b=&#34;2&#34;">A&amp;B</a>'


def test_mapping_input() -> None:
    assert format_name({"given": "John", "family": "Smith"}, "g+if") == "John Smith"
