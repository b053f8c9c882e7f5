# topmark:header:start
#
#   project      : Lice
#   file         : version.py
#   file_relpath : src/lice/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice `version` command.

Prints the current Lice version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from lice.cli.cmd_common import get_console, get_effective_verbosity
from lice.constants import LICE_VERSION


@click.command(
    name="version",
    help="Show the current version of Lice.",
)
def version_command() -> None:
    """Show the current version of Lice."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Lice version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(LICE_VERSION, bold=True)}")
    else:
        console.print(console.styled(LICE_VERSION, bold=True))
