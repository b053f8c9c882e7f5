# topmark:header:start
#
#   project      : Lice
#   file         : test_render.py
#   file_relpath : tests/licenses/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Tests for `lice.licenses.render` (template rendering)."""

from __future__ import annotations

import pytest

from lice.errors import TemplateError
from lice.licenses.render import render_body, render_per_file, render_template
from lice.text.indent import INDENT_RULES, IndentStyle
from tests.conftest import make_context, make_entry, parametrize


def test_render_body_normalizes_and_ends_with_one_newline() -> None:
    """The body is normalized and terminated by exactly one newline."""
    entry = make_entry(text="\n\n    Copyright {{ date('%Y') }} {{ author }}\n\n    Fine.\n\n\n")
    assert render_body(entry, make_context()) == "Copyright 2013 Alice Example\n\nFine.\n"


def test_date_and_time_use_strftime_layouts() -> None:
    """Both functions format the context's fixed time."""
    out = render_template("{{ date('%Y-%m-%d') }} {{ time('%H:%M') }}", make_context())
    assert out == "2013-06-01 12:00"


def test_project_block_skipped_when_absent() -> None:
    """``{% if project %}`` blocks render only when a project is set."""
    text = "A\n{% if project %}\nfor {{ project }}\n{% endif %}\n"
    assert render_body(make_entry(text=text), make_context()) == "A\n"
    assert render_body(make_entry(text=text), make_context(project="Lice")) == "A\nfor Lice\n"


def test_missing_author_is_an_error() -> None:
    """Templates that use the author need one."""
    with pytest.raises(TemplateError) as excinfo:
        render_body(make_entry(slug="mit"), make_context(author=None))
    assert excinfo.value.slug == "mit"
    assert "rendering template" in str(excinfo.value)


def test_author_not_needed_when_unused() -> None:
    """An unknown author is fine for templates that never mention one."""
    entry = make_entry(text="Public domain.\n")
    assert render_body(entry, make_context(author=None)) == "Public domain.\n"


@parametrize(
    "text",
    [
        "{% if author %}unterminated",
        "{{ author",
        "{{ author | no_such_filter }}",
    ],
)
def test_syntax_errors(text: str) -> None:
    """Malformed templates fail while parsing."""
    with pytest.raises(TemplateError, match="parsing template"):
        render_template(text, make_context(), slug="bad")


@parametrize(
    "text",
    [
        "{{ no_such_function() }}",
        "{{ range(3) }}",
        "{{ undefined_name }}",
        "{{ ''.__class__ }}",
    ],
)
def test_unknown_names_and_unsafe_access(text: str) -> None:
    """Only the render-context names are available to templates."""
    with pytest.raises(TemplateError):
        render_template(text, make_context(), slug="bad")


def test_render_per_file_with_prefix_rule() -> None:
    """The notice is wrapped and followed by one blank separator line."""
    out = render_per_file(make_entry(), make_context(), INDENT_RULES[IndentStyle.HASH])
    assert out == "# Copyright 2013 Alice Example.\n# Use as you please.\n\n"


def test_render_per_file_with_comment_rule() -> None:
    """Block comments enclose the notice."""
    out = render_per_file(make_entry(), make_context(), INDENT_RULES[IndentStyle.STAR])
    assert out == "/*\n   Copyright 2013 Alice Example.\n   Use as you please.\n */\n\n"


def test_render_per_file_without_rule_is_verbatim() -> None:
    """No rule inserts the normalized notice as plain text."""
    out = render_per_file(make_entry(), make_context())
    assert out == "Copyright 2013 Alice Example.\nUse as you please.\n\n"


def test_render_per_file_none_without_notice() -> None:
    """Licenses without per-file text produce no notice."""
    assert render_per_file(make_entry(per_file=None), make_context()) is None


@parametrize("style", [IndentStyle.HASH, IndentStyle.STAR, IndentStyle.NONE])
def test_render_per_file_none_when_notice_renders_empty(style: IndentStyle) -> None:
    """A notice that renders to blank text produces no header, not an empty comment."""
    entry = make_entry(per_file="{% if project %}\nPart of {{ project }}.\n{% endif %}\n")
    assert render_per_file(entry, make_context(), INDENT_RULES[style]) is None
    assert render_per_file(entry, make_context(project="Lice"), INDENT_RULES[style]) is not None
