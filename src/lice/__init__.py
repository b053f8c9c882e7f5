# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice package.

Lice generates license files from named templates and inserts per-file
copyright notices into source files, wrapped in the comment syntax of each
file. It exposes a Click CLI (``lice``) and the small API in `lice.licenses`,
`lice.text` and `lice.annotate`.
"""

from __future__ import annotations
