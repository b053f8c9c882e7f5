# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/licenses/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""License definitions, the license registry, and template rendering."""

from __future__ import annotations

from lice.licenses.builtins import BUILTIN_LICENSES
from lice.licenses.model import PER_FILE_NOTICE, LicenseEntry, RenderContext
from lice.licenses.registry import LicenseRegistry
from lice.licenses.render import render_body, render_per_file, render_template


def default_registry() -> LicenseRegistry:
    """Build a registry holding the built-in licenses."""
    return LicenseRegistry(BUILTIN_LICENSES)


__all__ = [
    "BUILTIN_LICENSES",
    "PER_FILE_NOTICE",
    "LicenseEntry",
    "LicenseRegistry",
    "RenderContext",
    "default_registry",
    "render_body",
    "render_per_file",
    "render_template",
]
