# topmark:header:start
#
#   project      : Lice
#   file         : test_block.py
#   file_relpath : tests/text/test_block.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Tests for `lice.text.block` (text block normalization)."""

from __future__ import annotations

from lice.text.block import TextBlock, leading_space, normalize
from tests.conftest import parametrize


def test_normalize_trims_untabifies_and_left_justifies() -> None:
    """Blank edges go, tabs expand, and the common indent is removed."""
    raw = "\n\n    Copyright 2013  \n\t  Alice\n\n      indented more\r\n\n"
    block = normalize(raw)
    assert block.lines == ["Copyright 2013", "  Alice", "", "  indented more"]


def test_normalize_keeps_internal_blank_lines() -> None:
    """Blank lines between paragraphs survive normalization."""
    block = normalize("a\n\n\nb\n")
    assert block.lines == ["a", "", "", "b"]


@parametrize("raw", ["", "\n", "   \n\t\n  ", "\r\n\r\n"])
def test_all_blank_input_yields_empty_block(raw: str) -> None:
    """Input made of whitespace only normalizes to no lines at all."""
    assert normalize(raw).lines == []
    assert normalize(raw).render() == ""


@parametrize(("width", "expected"), [(0, "    x"), (-3, "    x"), (2, "  x"), (8, "        x")])
def test_untabify_width(width: int, expected: str) -> None:
    """Non-positive widths fall back to four spaces."""
    assert TextBlock(["\tx"]).untabify(width).lines == [expected]


def test_left_justify_ignores_blank_lines() -> None:
    """Blank lines neither shorten the common prefix nor get modified."""
    block = TextBlock(["    a", "", "      b"]).left_justify()
    assert block.lines == ["a", "", "  b"]


def test_left_justify_leaves_lines_without_the_prefix() -> None:
    """A line that does not start with the shortest indentation is kept as is."""
    block = TextBlock(["  a", "\tb"]).left_justify()
    assert block.lines == ["  a", "b"]


def test_indent_skips_only_a_trailing_empty_line() -> None:
    """The prefix goes on every line except an empty final one."""
    block = TextBlock(["a", "", "b", ""]).indent("# ")
    assert block.lines == ["# a", "#", "# b", ""]


def test_chaining_returns_the_same_block() -> None:
    """Each step returns the block it was called on."""
    block = TextBlock.from_text(" x ")
    assert block.trim_space() is block
    assert block.untabify() is block
    assert block.left_justify() is block
    assert block.indent("> ") is block
    assert block.prepend("<") is block
    assert block.append(">") is block
    assert str(block) == "<\n> x\n>"


def test_leading_space() -> None:
    """Only the leading whitespace run is returned."""
    assert leading_space(" \t x  ") == " \t "
    assert leading_space("x") == ""
    assert leading_space("   ") == "   "


@parametrize(
    "raw",
    ["\n  a\n\t b\n\n   c  \n", "x", "\t\tdeep\n\tshallow\n", "  \n  only\n  \n"],
)
def test_normalize_is_idempotent_on_samples(raw: str) -> None:
    """Normalizing normalized output changes nothing."""
    once = normalize(raw)
    assert normalize(once.render()) == once
