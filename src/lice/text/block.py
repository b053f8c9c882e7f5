# topmark:header:start
#
#   project      : Lice
#   file         : block.py
#   file_relpath : src/lice/text/block.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Text block normalization for rendered license text.

A `TextBlock` holds the lines of a chunk of license text while it is being
cleaned up and formatted. Each operation rewrites the line list in place and
returns the block itself so steps can be chained:

```python
block = TextBlock.from_text(raw).trim_space().untabify().left_justify()
```

`normalize` performs that canonical sequence. The order matters: tabs are
expanded *before* the common indentation is computed, so templates that mix tabs
and spaces are left-justified on their expanded form.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lice.config.logging import get_logger
from lice.constants import DEFAULT_TAB_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from lice.config.logging import LiceLogger

logger: LiceLogger = get_logger(__name__)


def leading_space(line: str) -> str:
    """Return the run of whitespace characters at the start of ``line``."""
    return line[: len(line) - len(line.lstrip())]


class TextBlock:
    """An ordered sequence of text lines.

    Attributes:
        lines (list[str]): The current lines, without line terminators.
    """

    __slots__ = ("lines",)

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines: list[str] = list(lines)

    @classmethod
    def from_text(cls, text: str) -> TextBlock:
        """Split ``text`` on newlines into a new block."""
        return cls(text.split("\n"))

    def trim_space(self) -> TextBlock:
        """Strip trailing whitespace from every line and drop leading/trailing blank lines.

        Internal blank lines are preserved.

        Returns:
            TextBlock: This block.
        """
        lines = [line.rstrip() for line in self.lines]
        i, j = 0, len(lines)
        while i < j and lines[i] == "":
            i += 1
        while j > i and lines[j - 1] == "":
            j -= 1
        self.lines = lines[i:j]
        return self

    def untabify(self, width: int = 0) -> TextBlock:
        """Replace every tab with ``width`` spaces.

        Args:
            width (int): Number of spaces per tab; non-positive values use
                `DEFAULT_TAB_WIDTH`.

        Returns:
            TextBlock: This block.
        """
        if width <= 0:
            width = DEFAULT_TAB_WIDTH
        spaces = " " * width
        self.lines = [line.replace("\t", spaces) for line in self.lines]
        return self

    def left_justify(self) -> TextBlock:
        """Remove the indentation common to all non-blank lines.

        The shortest leading-whitespace run among non-blank lines is removed from
        every line that starts with it. Blank lines do not take part in the
        computation. Relative indentation inside the block is kept.

        Returns:
            TextBlock: This block.
        """
        shortest: str | None = None
        for line in self.lines:
            if line == "":
                continue
            spc = leading_space(line)
            if shortest is None or len(spc) < len(shortest):
                shortest = spc
        if shortest:
            n = len(shortest)
            self.lines = [line[n:] if line.startswith(shortest) else line for line in self.lines]
        return self

    def indent(self, marker: str) -> TextBlock:
        """Prefix each line with ``marker`` and strip trailing whitespace again.

        A trailing empty final line is left alone so a block that ends with a
        separator keeps it. A blank line becomes the marker without its trailing
        whitespace, or an empty line if the marker is whitespace only.

        Args:
            marker (str): The prefix to apply.

        Returns:
            TextBlock: This block.
        """
        last = len(self.lines) - 1
        self.lines = [
            line if (line == "" and i == last) else (marker + line).rstrip()
            for i, line in enumerate(self.lines)
        ]
        return self

    def prepend(self, line: str) -> TextBlock:
        """Insert ``line`` before the first line."""
        self.lines.insert(0, line)
        return self

    def append(self, *lines: str) -> TextBlock:
        """Add ``lines`` after the last line."""
        self.lines.extend(lines)
        return self

    def render(self) -> str:
        """Join the lines with newlines."""
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TextBlock({self.lines!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextBlock):
            return NotImplemented
        return self.lines == other.lines

    __hash__ = None  # type: ignore[assignment]


def normalize(text: str, *, tab_width: int = 0) -> TextBlock:
    """Return ``text`` as a trimmed, untabified, left-justified block.

    Normalization is idempotent: normalizing the rendered result of a normalized
    block yields the same lines.

    Args:
        text (str): Raw multi-line text.
        tab_width (int): Spaces per tab (non-positive means `DEFAULT_TAB_WIDTH`).

    Returns:
        TextBlock: The normalized block (empty for all-blank input).
    """
    block = TextBlock.from_text(text).trim_space().untabify(tab_width).left_justify()
    logger.trace("normalized %d line(s)", len(block))
    return block
