# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/annotate/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""License file writing and crash-safe per-file annotation."""

from __future__ import annotations

from lice.annotate.annotator import (
    AnnotationResult,
    AnnotationStatus,
    BatchResult,
    annotate_file,
    annotate_paths,
    write_license_file,
)
from lice.annotate.atomic import atomic_rewrite

__all__ = [
    "AnnotationResult",
    "AnnotationStatus",
    "BatchResult",
    "annotate_file",
    "annotate_paths",
    "atomic_rewrite",
    "write_license_file",
]
