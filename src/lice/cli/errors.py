# topmark:header:start
#
#   project      : Lice
#   file         : errors.py
#   file_relpath : src/lice/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Exceptions for the Lice CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `cli_error_from` translates core exceptions from
    `lice.errors`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from lice.cli.exit_codes import ExitCode
from lice.errors import (
    ConfigError,
    LiceError,
    LicenseFileExistsError,
    TemplateError,
    UnknownLicenseError,
)


class LiceCliError(click.ClickException):
    """Base class for all Lice CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LiceUsageError(LiceCliError):
    """Error for command-line invocation errors (invalid flags/args, unknown license)."""

    exit_code = ExitCode.USAGE_ERROR


class LiceTemplateError(LiceCliError):
    """Error for license templates that cannot be rendered."""

    exit_code = ExitCode.DATA_ERROR


class LiceFileExistsError(LiceCliError):
    """Error when an output file exists and --force was not given."""

    exit_code = ExitCode.CANT_CREATE


class LiceIOError(LiceCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class LiceConfigError(LiceCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def cli_error_from(exc: LiceError | OSError, *, action: str) -> LiceCliError:
    """Map a core exception onto the matching CLI error.

    Args:
        exc (LiceError | OSError): The exception raised by the core.
        action (str): What was being done, e.g. "Writing license file".

    Returns:
        LiceCliError: The CLI error to raise.
    """
    message = f"{action}: {exc}"
    if isinstance(exc, UnknownLicenseError):
        return LiceUsageError(str(exc))
    if isinstance(exc, TemplateError):
        return LiceTemplateError(message)
    if isinstance(exc, LicenseFileExistsError):
        return LiceFileExistsError(str(exc))
    if isinstance(exc, ConfigError):
        return LiceConfigError(message)
    if isinstance(exc, OSError):
        return LiceIOError(message)
    return LiceCliError(message)
