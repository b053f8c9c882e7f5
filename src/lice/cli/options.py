# topmark:header:start
#
#   project      : Lice
#   file         : options.py
#   file_relpath : src/lice/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Shared Click options for Lice commands.

Decorators here add option groups reused by several commands, so help texts and
defaults stay consistent:

- `common_verbose_options` / `common_color_options`: group-level output control.
- `render_context_options`: ``--author``, ``--project``, ``--date``.
- `license_option`: ``-L/--license``.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

import click

from lice.cli.errors import LiceUsageError
from lice.constants import DATE_LAYOUT

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., object]")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        LiceUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LiceUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -quiet_count
    return verbose_count


def common_verbose_options(f: F) -> F:
    """Add --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress progress output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors --color/--no-color first, then the FORCE_COLOR and NO_COLOR
    environment variables, and finally whether stdout is a TTY.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR"):
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return stdout_isatty


def common_color_options(f: F) -> F:
    """Add --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def render_context_options(f: F) -> F:
    """Add the options that feed the template render context."""
    f = click.option(
        "--author",
        default=None,
        help="Copyright author for attribution (default: current user or config).",
    )(f)
    f = click.option(
        "--project",
        default=None,
        help="Project name, if different from the author.",
    )(f)
    f = click.option(
        "--date",
        "date_value",
        type=click.DateTime(formats=[DATE_LAYOUT]),
        default=None,
        help="Copyright date for attribution, as YYYY-MM-DD (default: today).",
    )(f)
    return f


def license_option(f: F) -> F:
    """Add the -L/--license option."""
    return click.option(
        "-L",
        "--license",
        "slug",
        default=None,
        metavar="SLUG",
        help="License to use (see 'lice list'; default: from config).",
    )(f)
