# topmark:header:start
#
#   project      : Lice
#   file         : test_annotator.py
#   file_relpath : tests/annotate/test_annotator.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Tests for `lice.annotate` (license files and crash-safe annotation)."""

from __future__ import annotations

import os
import stat
import sys
from typing import IO, TYPE_CHECKING, Any

import pytest

from lice.annotate import (
    AnnotationStatus,
    annotate_file,
    annotate_paths,
    atomic_rewrite,
    write_license_file,
)
from lice.errors import LicenseFileExistsError, TemplateError
from lice.text.indent import INDENT_RULES, IndentStyle
from tests.conftest import make_context, make_entry, parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.annotate

HASH_NOTICE: str = "# Copyright 2013 Alice Example.\n# Use as you please.\n\n"


def _leftovers(directory: Path, name: str) -> list[str]:
    """Return temporary files left beside ``name``."""
    return sorted(p.name for p in directory.iterdir() if p.name.startswith(f"{name}~"))


def test_annotate_inserts_notice_before_content(tmp_path: Path) -> None:
    """The notice plus a blank line precede the untouched original bytes."""
    target = tmp_path / "tool.py"
    target.write_bytes(b"print('hi')\n")
    with open(target, "rb") as f:
        status = annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.HASH])
    assert status is AnnotationStatus.INSERTED
    assert target.read_bytes() == HASH_NOTICE.encode() + b"print('hi')\n"
    assert _leftovers(tmp_path, "tool.py") == []


def test_annotate_copies_whole_file_from_any_position(tmp_path: Path) -> None:
    """A handle positioned mid-file still gets the complete original copied."""
    original = b"line one\nline two\nline three\n"
    target = tmp_path / "script"
    target.write_bytes(original)
    with open(target, "rb") as f:
        f.seek(12)
        annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.HASH])
    assert target.read_bytes() == HASH_NOTICE.encode() + original


def test_annotate_accepts_text_handles(tmp_path: Path) -> None:
    """Text handles are copied through their byte buffer, byte for byte."""
    original = "café\r\nbar\n".encode()
    target = tmp_path / "x.go"
    target.write_bytes(original)
    with open(target, encoding="utf-8") as f:
        f.readline()
        annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.SLASH])
    assert target.read_bytes().endswith(b"\n\n" + original)
    assert target.read_bytes().startswith(b"// Copyright 2013")


def test_annotate_empty_file(tmp_path: Path) -> None:
    """An empty file ends up holding just the notice."""
    target = tmp_path / "empty.sh"
    target.write_bytes(b"")
    with open(target, "rb") as f:
        annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.HASH])
    assert target.read_text(encoding="utf-8") == HASH_NOTICE


def test_copy_failure_leaves_original_untouched(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """If copying fails, the original survives and no temporary file remains."""
    original = b"keep me\n"
    target = tmp_path / "main.c"
    target.write_bytes(original)

    def _boom(src: IO[bytes], dst: IO[bytes], *args: Any, **kwargs: Any) -> None:
        dst.write(b"partial")
        raise OSError("disk full")

    monkeypatch.setattr("lice.annotate.annotator.shutil.copyfileobj", _boom)
    with open(target, "rb") as f, pytest.raises(OSError, match="disk full"):
        annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.STAR])

    assert target.read_bytes() == original
    assert _leftovers(tmp_path, "main.c") == []


def test_empty_notice_leaves_file_untouched(tmp_path: Path) -> None:
    """A notice that renders to nothing leaves the target as it was."""
    target = tmp_path / "main.c"
    target.write_bytes(b"int x;\n")
    entry = make_entry(per_file="{% if project %}{{ project }}{% endif %}\n")
    with open(target, "rb") as f:
        status = annotate_file(entry, make_context(), f, INDENT_RULES[IndentStyle.STAR])
    assert status is AnnotationStatus.UNCHANGED
    assert target.read_bytes() == b"int x;\n"
    assert _leftovers(tmp_path, "main.c") == []


@parametrize("failing", ["fsync", "replace"])
def test_sync_or_rename_failure_leaves_original_untouched(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, failing: str
) -> None:
    """Failures after the copy still keep the original and remove the temporary file."""
    original = b"keep me\n"
    target = tmp_path / "tool.py"
    target.write_bytes(original)

    def _boom(*args: Any, **kwargs: Any) -> None:
        raise OSError(f"{failing} failed")

    monkeypatch.setattr(f"lice.annotate.atomic.os.{failing}", _boom)
    with open(target, "rb") as f, pytest.raises(OSError, match=f"{failing} failed"):
        annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.HASH])

    assert target.read_bytes() == original
    assert _leftovers(tmp_path, "tool.py") == []


def test_template_error_creates_no_temp_file(tmp_path: Path) -> None:
    """Rendering fails before anything is written."""
    target = tmp_path / "a.py"
    target.write_bytes(b"x = 1\n")
    with open(target, "rb") as f, pytest.raises(TemplateError):
        annotate_file(make_entry(), make_context(author=None), f)
    assert target.read_bytes() == b"x = 1\n"
    assert _leftovers(tmp_path, "a.py") == []


def test_license_without_notice_is_a_no_op(tmp_path: Path) -> None:
    """Licenses without per-file text leave the file alone."""
    target = tmp_path / "a.py"
    target.write_bytes(b"x = 1\n")
    before = target.stat().st_mtime_ns
    with open(target, "rb") as f:
        status = annotate_file(make_entry(per_file=None), make_context(), f)
    assert status is AnnotationStatus.UNCHANGED
    assert target.read_bytes() == b"x = 1\n"
    assert target.stat().st_mtime_ns == before


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX file modes")
def test_file_mode_is_preserved(tmp_path: Path) -> None:
    """An executable script stays executable after annotation."""
    target = tmp_path / "run.sh"
    target.write_bytes(b"echo hi\n")
    os.chmod(target, 0o755)
    with open(target, "rb") as f:
        annotate_file(make_entry(), make_context(), f, INDENT_RULES[IndentStyle.HASH])
    assert stat.S_IMODE(target.stat().st_mode) == 0o755


def test_atomic_rewrite_commits_on_success(tmp_path: Path) -> None:
    """The target is replaced only when the block exits normally."""
    target = tmp_path / "f.txt"
    target.write_bytes(b"old")
    with atomic_rewrite(target) as tmp:
        tmp.write(b"new")
        assert target.read_bytes() == b"old"
        assert len(_leftovers(tmp_path, "f.txt")) == 1
    assert target.read_bytes() == b"new"
    assert _leftovers(tmp_path, "f.txt") == []


def test_atomic_rewrite_discards_on_error(tmp_path: Path) -> None:
    """An exception inside the block removes the temporary file."""
    target = tmp_path / "f.txt"
    target.write_bytes(b"old")
    with pytest.raises(RuntimeError), atomic_rewrite(target) as tmp:
        tmp.write(b"new")
        raise RuntimeError("stop")
    assert target.read_bytes() == b"old"
    assert _leftovers(tmp_path, "f.txt") == []


def test_write_license_file(tmp_path: Path) -> None:
    """The rendered body is written as UTF-8."""
    dest = tmp_path / "LICENSE"
    n = write_license_file(make_entry(), make_context(author="Jörg"), dest)
    data = dest.read_bytes()
    assert n == len(data)
    assert data.decode("utf-8") == "Copyright 2013 Jörg\n\nDo as you please.\n"


def test_write_license_file_refuses_existing(tmp_path: Path) -> None:
    """An existing file is kept unless ``force`` is set."""
    dest = tmp_path / "LICENSE"
    dest.write_text("mine\n", encoding="utf-8")
    with pytest.raises(LicenseFileExistsError) as excinfo:
        write_license_file(make_entry(), make_context(), dest)
    assert excinfo.value.path == dest
    assert dest.read_text(encoding="utf-8") == "mine\n"

    write_license_file(make_entry(), make_context(), dest, force=True)
    assert dest.read_text(encoding="utf-8").startswith("Copyright 2013")


def test_write_license_file_renders_before_opening(tmp_path: Path) -> None:
    """A template error leaves no output file behind."""
    dest = tmp_path / "LICENSE"
    with pytest.raises(TemplateError):
        write_license_file(make_entry(), make_context(author=None), dest)
    assert not dest.exists()


def test_annotate_paths_continues_after_failure(tmp_path: Path) -> None:
    """A missing file is recorded and later files are still annotated."""
    first = tmp_path / "a.go"
    first.write_bytes(b"package a\n")
    missing = tmp_path / "missing.py"
    last = tmp_path / "c.html"
    last.write_bytes(b"<p>hi</p>\n")

    batch = annotate_paths(make_entry(), make_context(), [first, missing, last])

    assert [r.status for r in batch.results] == [
        AnnotationStatus.INSERTED,
        AnnotationStatus.FAILED,
        AnnotationStatus.INSERTED,
    ]
    assert not batch.ok
    assert [r.path for r in batch.failed] == [missing]
    assert batch.failed[0].error
    assert first.read_bytes().startswith(b"// Copyright 2013")
    assert last.read_bytes().startswith(b"<!--\n   Copyright 2013")


def test_annotate_paths_explicit_style(tmp_path: Path) -> None:
    """An explicit style overrides extension inference for every file."""
    target = tmp_path / "a.go"
    target.write_bytes(b"package a\n")
    batch = annotate_paths(make_entry(), make_context(), [target], style="sstar")
    assert batch.ok
    assert target.read_bytes().startswith(b"/*\n * Copyright 2013")


def test_annotate_paths_template_error_aborts(tmp_path: Path) -> None:
    """A notice that cannot render stops the batch before any file changes."""
    target = tmp_path / "a.py"
    target.write_bytes(b"x = 1\n")
    with pytest.raises(TemplateError):
        annotate_paths(make_entry(), make_context(author=None), [target])
    assert target.read_bytes() == b"x = 1\n"
