# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Text normalization and comment wrapping for license text."""

from __future__ import annotations

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

__all__ = [
    "INDENT_RULES",
    "IndentKind",
    "IndentRule",
    "IndentStyle",
    "TextBlock",
    "choose_indent_rule",
    "guess_indent_rule",
    "guess_indent_style",
    "normalize",
]
