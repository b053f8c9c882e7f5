# topmark:header:start
#
#   project      : Lice
#   file         : annotator.py
#   file_relpath : src/lice/annotate/annotator.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Write license files and insert per-file license notices into source files.

Operations:
    - `write_license_file`: render a license's full text into a standalone file.
    - `annotate_file`: prepend a license's per-file notice to an open file, using
      `lice.annotate.atomic.atomic_rewrite` so a failure never corrupts it.
    - `annotate_paths`: annotate a list of files one after another, recording a
      per-file outcome instead of stopping at the first failure.

Rendering always completes in memory before any destination is touched, so a
template error never leaves partial output behind.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from lice.annotate.atomic import atomic_rewrite
from lice.config.logging import get_logger
from lice.errors import LicenseFileExistsError
from lice.licenses.render import render_body, render_per_file
from lice.text.indent import IndentStyle, choose_indent_rule

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lice.config.logging import LiceLogger
    from lice.licenses.model import LicenseEntry, RenderContext
    from lice.text.indent import IndentRule

logger: LiceLogger = get_logger(__name__)


class AnnotationStatus(str, Enum):
    """Outcome of annotating one file.

    Attributes:
        INSERTED: The per-file notice was inserted.
        UNCHANGED: The license has no per-file notice; the file was not touched.
        FAILED: The file could not be annotated; see `AnnotationResult.error`.
    """

    INSERTED = "inserted"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass(frozen=True)
class AnnotationResult:
    """Outcome of annotating one path."""

    path: Path
    status: AnnotationStatus
    error: str | None = None


@dataclass
class BatchResult:
    """Per-file outcomes of `annotate_paths`, in processing order."""

    results: list[AnnotationResult] = field(default_factory=lambda: [])

    @property
    def ok(self) -> bool:
        """True if no file failed."""
        return all(r.status is not AnnotationStatus.FAILED for r in self.results)

    @property
    def failed(self) -> list[AnnotationResult]:
        """Results of the files that failed."""
        return [r for r in self.results if r.status is AnnotationStatus.FAILED]


def write_license_file(
    entry: LicenseEntry,
    context: RenderContext,
    path: str | Path,
    *,
    force: bool = False,
) -> int:
    """Write the full text of ``entry`` to ``path`` as UTF-8.

    Args:
        entry (LicenseEntry): The license to write.
        context (RenderContext): Values to substitute.
        path (str | Path): Destination file.
        force (bool): Overwrite an existing destination.

    Returns:
        int: Number of bytes written.

    Raises:
        LicenseFileExistsError: If ``path`` exists and ``force`` is False.
    """
    data = render_body(entry, context).encode("utf-8")
    dest = Path(path)
    try:
        with open(dest, "wb" if force else "xb") as f:
            f.write(data)
    except FileExistsError as exc:
        raise LicenseFileExistsError(dest) from exc
    logger.info("wrote %s (%d bytes) to %s", entry.slug, len(data), dest)
    return len(data)


def annotate_file(
    entry: LicenseEntry,
    context: RenderContext,
    handle: IO[Any],
    rule: IndentRule | None = None,
) -> AnnotationStatus:
    """Insert the per-file notice of ``entry`` at the head of an open file.

    The handle may be positioned anywhere: the whole file is copied after the
    notice. The notice is written to a temporary file beside the target, the
    original content is copied after it, and the result replaces the target.
    On failure the temporary file is removed and the target is unchanged.

    Args:
        entry (LicenseEntry): The license whose notice to insert.
        context (RenderContext): Values to substitute.
        handle (IO[Any]): The target file, opened for reading (binary or text).
        rule (IndentRule | None): Indenting rule; None inserts the text verbatim.

    Returns:
        AnnotationStatus: ``INSERTED``, or ``UNCHANGED`` if the license has no
        per-file notice or the notice renders to nothing.
    """
    if not entry.has_per_file:
        logger.debug("%s has no per-file notice; leaving %s alone", entry.slug, handle.name)
        return AnnotationStatus.UNCHANGED

    target = Path(os.path.abspath(handle.name))

    # Copy from the underlying byte stream of text handles.
    source: IO[bytes] = getattr(handle, "buffer", handle)
    source.seek(0)

    header = render_per_file(entry, context, rule)
    if header is None:
        logger.debug("empty %s notice; leaving %s alone", entry.slug, target)
        return AnnotationStatus.UNCHANGED

    with atomic_rewrite(target) as tmp:
        tmp.write(header.encode("utf-8"))
        shutil.copyfileobj(source, tmp)
    logger.info("inserted %s notice into %s", entry.slug, target)
    return AnnotationStatus.INSERTED


def annotate_paths(
    entry: LicenseEntry,
    context: RenderContext,
    paths: Iterable[str | Path],
    *,
    style: IndentStyle | str = IndentStyle.GUESS,
) -> BatchResult:
    """Annotate each of ``paths`` in order.

    An I/O failure on one file is recorded and the remaining files are still
    processed. Template errors propagate: the notice is rendered before any
    file is touched, so they surface on the first file.

    Args:
        entry (LicenseEntry): The license whose notice to insert.
        context (RenderContext): Values to substitute.
        paths (Iterable[str | Path]): Files to annotate.
        style (IndentStyle | str): Indent style; ``guess`` infers one per file.

    Returns:
        BatchResult: One result per path.

    Raises:
        TemplateError: If the per-file notice cannot be rendered.
    """
    style = IndentStyle(style)
    batch = BatchResult()
    for p in paths:
        path = Path(p)
        rule = choose_indent_rule(style, path)
        try:
            with open(path, "rb") as f:
                status = annotate_file(entry, context, f, rule)
        except OSError as exc:
            logger.error("Editing %s: %s", path, exc)
            batch.results.append(AnnotationResult(path, AnnotationStatus.FAILED, str(exc)))
            continue
        batch.results.append(AnnotationResult(path, status))
    return batch
