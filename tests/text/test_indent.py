# topmark:header:start
#
#   project      : Lice
#   file         : test_indent.py
#   file_relpath : tests/text/test_indent.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Tests for `lice.text.indent` (indenting rules and style inference)."""

from __future__ import annotations

import pytest
from hypothesis import given

from lice.text.block import TextBlock, normalize
from lice.text.indent import (
    INDENT_RULES,
    IndentKind,
    IndentRule,
    IndentStyle,
    choose_indent_rule,
    guess_indent_rule,
    guess_indent_style,
)
from tests.conftest import parametrize
from tests.strategies_lice import s_marker, s_raw_text


def test_prefix_rule_marks_every_line() -> None:
    """Blank lines get the marker with its trailing space removed."""
    block = IndentRule.prefix("# ").apply(TextBlock(["a", "", "b"]))
    assert block.lines == ["# a", "#", "# b"]


def test_whitespace_marker_collapses_blank_lines() -> None:
    """A whitespace-only marker leaves blank lines empty."""
    block = IndentRule.prefix("   ").apply(TextBlock(["x", "", "y"]))
    assert block.lines == ["   x", "", "   y"]


def test_comment_rule_wraps_the_block() -> None:
    """Open and close lines are added around the continuation-marked body."""
    block = INDENT_RULES[IndentStyle.STAR].apply(TextBlock(["x"]))
    assert block.lines == ["/*", "   x", " */"]


def test_sstar_rule() -> None:
    """The starred C style marks each body line with ``*``."""
    block = INDENT_RULES[IndentStyle.SSTAR].apply(TextBlock(["a", "", "b"]))
    assert block.lines == ["/*", " * a", " *", " * b", " */"]


def test_xml_rule() -> None:
    """Markup comments keep their close marker untrimmed."""
    block = INDENT_RULES[IndentStyle.XML].apply(TextBlock(["hi"]))
    assert block.lines == ["<!--", "   hi", "  -->"]


def test_identity_rule_leaves_text_alone() -> None:
    """The identity rule returns the block unchanged."""
    block = TextBlock(["  a ", ""])
    assert IndentRule.identity().apply(block).lines == ["  a ", ""]
    assert IndentRule.identity().kind is IndentKind.NONE


@parametrize(
    ("path", "style"),
    [
        ("main.go", IndentStyle.SLASH),
        ("x.cc", IndentStyle.SLASH),
        ("Foo.java", IndentStyle.SLASH),
        ("app.js", IndentStyle.SLASH),
        ("setup.py", IndentStyle.HASH),
        ("run.sh", IndentStyle.HASH),
        ("tool.pl", IndentStyle.HASH),
        ("lib.rb", IndentStyle.HASH),
        ("Makefile", IndentStyle.HASH),
        ("src/bin/tool", IndentStyle.HASH),
        ("util.c", IndentStyle.STAR),
        ("util.h", IndentStyle.STAR),
        ("index.html", IndentStyle.XML),
        ("index.htm", IndentStyle.XML),
        ("page.xhtml", IndentStyle.XML),
        ("MAIN.GO", IndentStyle.SLASH),
        ("lib.rs", IndentStyle.NONE),
        ("notes.txt", IndentStyle.NONE),
    ],
)
def test_guess_indent_style(path: str, style: IndentStyle) -> None:
    """Styles are inferred from the extension; unknown ones get no wrapping."""
    assert guess_indent_style(path) is style
    assert guess_indent_rule(path) == INDENT_RULES[style]


def test_choose_indent_rule_explicit_style_wins() -> None:
    """An explicit style ignores the file name."""
    assert choose_indent_rule("slash", "x.py") == INDENT_RULES[IndentStyle.SLASH]
    assert choose_indent_rule(IndentStyle.NONE, "x.py").kind is IndentKind.NONE


def test_choose_indent_rule_guess() -> None:
    """``guess`` defers to inference."""
    assert choose_indent_rule(IndentStyle.GUESS, "x.go") == INDENT_RULES[IndentStyle.SLASH]


def test_choose_indent_rule_rejects_unknown_style() -> None:
    """Unknown style names are an error rather than a silent fallback."""
    with pytest.raises(ValueError):
        choose_indent_rule("fancy", "x.py")


@given(raw=s_raw_text(), marker=s_marker())
def test_prefix_rule_output_shape(raw: str, marker: str) -> None:
    """Every prefixed line starts with the trimmed marker and has no trailing space."""
    block = IndentRule.prefix(marker).apply(normalize(raw))
    for line in block:
        assert line.startswith(marker.rstrip())
        assert line == line.rstrip()
