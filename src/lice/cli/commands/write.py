# topmark:header:start
#
#   project      : Lice
#   file         : write.py
#   file_relpath : src/lice/cli/commands/write.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice `write` command.

Writes the full text of a license to a new file. An existing file is left alone
unless ``--force`` is given.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import click

from lice.annotate import write_license_file
from lice.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    resolve_license,
)
from lice.cli.errors import cli_error_from
from lice.cli.options import license_option, render_context_options
from lice.errors import LicenseFileExistsError, TemplateError


@click.command(
    name="write",
    help="Write the text of a license to a file.",
    epilog="""
The file must not already exist unless --force is given. Typical usage:

    lice write -L mit-expat LICENSE
""",
)
@license_option
@click.option(
    "-f",
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite the output file if it exists.",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@render_context_options
def write_command(
    *,
    slug: str | None,
    force: bool,
    path: Path,
    author: str | None,
    project: str | None,
    date_value: dt.datetime | None,
) -> None:
    """Write the selected license to PATH."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx, author=author, project=project, date=date_value, license=slug)
    entry = resolve_license(ctx, config)

    try:
        write_license_file(entry, config.render_context(), path, force=force)
    except (TemplateError, LicenseFileExistsError, OSError) as exc:
        raise cli_error_from(exc, action="Writing license file") from exc

    if get_effective_verbosity(ctx) >= 0:
        console.info(f"Wrote {entry.name} to {path}")
