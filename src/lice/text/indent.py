# topmark:header:start
#
#   project      : Lice
#   file         : indent.py
#   file_relpath : src/lice/text/indent.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Indenting rules: adapt license text to a target file's comment syntax.

An `IndentRule` is one of three variants, tagged by `IndentKind`:

- ``NONE``: identity, the text is inserted verbatim.
- ``PREFIX``: every line gets a marker prepended (``# ``, ``// ``).
- ``COMMENT``: every line gets a continuation marker, then an opening line
  and a closing line wrap the block (``/*`` ... `` */``).

Layout example for the ``sstar`` style:

/*
 * Copyright (C) 2025 Jane Doe. All Rights Reserved.
 */

`IndentStyle` names the rules users can select. ``guess`` infers a rule from
the target file's extension (see `guess_indent_rule`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from lice.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lice.config.logging import LiceLogger
    from lice.text.block import TextBlock

logger: LiceLogger = get_logger(__name__)


class IndentKind(str, Enum):
    """Variant tag of an `IndentRule`."""

    NONE = "none"
    PREFIX = "prefix"
    COMMENT = "comment"


@dataclass(frozen=True)
class IndentRule:
    """Policy for indenting or commenting license text.

    Attributes:
        kind (IndentKind): Which variant this rule is.
        marker (str): Per-line prefix (``PREFIX``) or continuation marker (``COMMENT``).
        first (str): Opening line inserted before the body (``COMMENT`` only).
        last (str): Closing line appended after the body (``COMMENT`` only).
    """

    kind: IndentKind = IndentKind.NONE
    marker: str = ""
    first: str = ""
    last: str = ""

    @classmethod
    def identity(cls) -> IndentRule:
        """Return the rule that leaves text unmodified."""
        return cls(IndentKind.NONE)

    @classmethod
    def prefix(cls, marker: str) -> IndentRule:
        """Return a rule that prefixes each line with ``marker``."""
        return cls(IndentKind.PREFIX, marker=marker)

    @classmethod
    def comment(cls, first: str, rest: str, last: str) -> IndentRule:
        """Return a rule wrapping the text in ``first``/``last`` with ``rest`` on each line."""
        return cls(IndentKind.COMMENT, marker=rest, first=first, last=last)

    def apply(self, block: TextBlock) -> TextBlock:
        """Apply this rule to ``block``.

        The opening and closing lines of a ``COMMENT`` rule are added as-is; only
        body lines are re-trimmed after prefixing.

        Args:
            block (TextBlock): A normalized block; it is modified in place.

        Returns:
            TextBlock: The same block with the rule applied.
        """
        if self.kind is IndentKind.PREFIX:
            return block.indent(self.marker)
        if self.kind is IndentKind.COMMENT:
            return block.indent(self.marker).prepend(self.first).append(self.last)
        return block

    def describe(self) -> str:
        """Return a short human-readable description of the markers."""
        if self.kind is IndentKind.PREFIX:
            return repr(self.marker)
        if self.kind is IndentKind.COMMENT:
            return f"{self.first!r} {self.marker!r} {self.last!r}"
        return "(verbatim)"


class IndentStyle(str, Enum):
    """Indent styles selectable by name.

    ``GUESS`` is not a rule by itself: it asks for inference from the file name.
    """

    GUESS = "guess"
    HASH = "hash"
    NONE = "none"
    SLASH = "slash"
    STAR = "star"
    SSTAR = "sstar"
    XML = "xml"


INDENT_RULES: Final[Mapping[IndentStyle, IndentRule]] = MappingProxyType(
    {
        IndentStyle.HASH: IndentRule.prefix("# "),  # like bash, Python, Perl
        IndentStyle.SLASH: IndentRule.prefix("// "),  # like C++, Go, Java
        IndentStyle.STAR: IndentRule.comment("/*", "   ", " */"),  # like C
        IndentStyle.SSTAR: IndentRule.comment("/*", " * ", " */"),  # like C
        IndentStyle.XML: IndentRule.comment("<!--", "   ", "  -->"),  # like HTML, XML
        IndentStyle.NONE: IndentRule.identity(),
    }
)

# Extensions are matched lower-cased; "" covers files without an extension.
GUESS_BY_EXTENSION: Final[Mapping[str, IndentStyle]] = MappingProxyType(
    {
        "": IndentStyle.HASH,
        ".sh": IndentStyle.HASH,
        ".py": IndentStyle.HASH,
        ".pl": IndentStyle.HASH,
        ".rb": IndentStyle.HASH,
        ".cc": IndentStyle.SLASH,
        ".cpp": IndentStyle.SLASH,
        ".go": IndentStyle.SLASH,
        ".java": IndentStyle.SLASH,
        ".js": IndentStyle.SLASH,
        ".c": IndentStyle.STAR,
        ".h": IndentStyle.STAR,
        ".htm": IndentStyle.XML,
        ".html": IndentStyle.XML,
        ".xhtml": IndentStyle.XML,
    }
)


def guess_indent_style(path: str | Path) -> IndentStyle:
    """Infer an indent style from the extension of ``path``.

    Unknown extensions map to `IndentStyle.NONE`; this function never fails.
    """
    ext = Path(path).suffix.lower()
    return GUESS_BY_EXTENSION.get(ext, IndentStyle.NONE)


def guess_indent_rule(path: str | Path) -> IndentRule:
    """Infer an indenting rule from the extension of ``path``.

    Args:
        path (str | Path): The target file name.

    Returns:
        IndentRule: The inferred rule, or the identity rule for unknown extensions.
    """
    style = guess_indent_style(path)
    logger.debug("guessed indent style %s for %s", style.value, path)
    return INDENT_RULES[style]


def choose_indent_rule(style: IndentStyle | str, path: str | Path) -> IndentRule:
    """Pick the indenting rule for a file.

    An explicit style is used as-is; ``guess`` infers one from ``path``.

    Args:
        style (IndentStyle | str): Style name or member.
        path (str | Path): The target file name (used only for ``guess``).

    Returns:
        IndentRule: The rule to apply.

    Raises:
        ValueError: If ``style`` is not a known style name.
    """
    style = IndentStyle(style)
    if style is IndentStyle.GUESS:
        return guess_indent_rule(path)
    return INDENT_RULES[style]
