# topmark:header:start
#
#   project      : Lice
#   file         : errors.py
#   file_relpath : src/lice/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Domain exceptions raised by the Lice core.

The core (registry, renderer, annotator, config) raises these exceptions; the CLI
maps them onto `lice.cli.errors` with standardized exit codes. I/O failures are
not wrapped: they propagate as `OSError` from single-file operations.
"""

from __future__ import annotations

from pathlib import Path


class LiceError(Exception):
    """Base class for all Lice errors."""


class UnknownLicenseError(LiceError, LookupError):
    """Raised when a license slug is not present in the registry."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Unknown license type {slug!r} (use 'lice list' for a list)")
        self.slug = slug


class InvalidLicenseError(LiceError, ValueError):
    """Raised when a license entry cannot be registered."""


class DuplicateLicenseError(InvalidLicenseError):
    """Raised when a slug is registered twice."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Duplicate registrations for slug {slug!r}")
        self.slug = slug


class TemplateError(LiceError):
    """Raised when license template text cannot be parsed or rendered."""

    def __init__(self, slug: str, message: str) -> None:
        super().__init__(f"License {slug!r}: {message}")
        self.slug = slug
        self.message = message


class LicenseFileExistsError(LiceError):
    """Raised when a standalone license file exists and overwriting was not allowed."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"License file {path} already exists (use --force to overwrite)")
        self.path = path


class ConfigError(LiceError, ValueError):
    """Raised for invalid configuration values."""
