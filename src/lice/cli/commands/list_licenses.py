# topmark:header:start
#
#   project      : Lice
#   file         : list_licenses.py
#   file_relpath : src/lice/cli/commands/list_licenses.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice `list` command.

Lists the registered licenses in slug order, one per line, with their full
names and reference URLs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lice.cli.cmd_common import get_console, get_effective_verbosity, get_registry

if TYPE_CHECKING:
    from lice.licenses.model import LicenseEntry


def format_license_table(entries: list[LicenseEntry]) -> list[str]:
    """Format license entries as aligned ``slug  name  url`` rows.

    Args:
        entries (list[LicenseEntry]): Entries in display order.

    Returns:
        list[str]: One row per entry, without trailing whitespace.
    """
    if not entries:
        return []
    slug_width = max(len(e.slug) for e in entries)
    name_width = max(len(e.name) for e in entries)
    return [
        f"{e.slug:<{slug_width}}  {e.name:<{name_width}}  {e.url or ''}".rstrip()
        for e in entries
    ]


@click.command(
    name="list",
    help="List the available license types.",
)
def list_command() -> None:
    """List the available license types."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    entries = list(get_registry(ctx))

    if get_effective_verbosity(ctx) >= 0:
        console.print(console.styled("Available licenses:\n", bold=True, underline=True))
    for row in format_license_table(entries):
        console.print(row)
