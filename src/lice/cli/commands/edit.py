# topmark:header:start
#
#   project      : Lice
#   file         : edit.py
#   file_relpath : src/lice/cli/commands/edit.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice `edit` command.

Prepends the per-file notice of a license to each named file, wrapped in the
comment syntax chosen by ``--indent`` (inferred from each file's extension by
default). Files are processed in order; a file that cannot be edited is
reported and skipped, and the command exits with status 1 once all files have
been processed.
"""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import click

from lice.annotate import AnnotationStatus, annotate_paths
from lice.cli.cmd_common import (
    build_config,
    get_console,
    get_effective_verbosity,
    resolve_license,
)
from lice.cli.errors import cli_error_from
from lice.cli.exit_codes import ExitCode
from lice.cli.options import license_option, render_context_options
from lice.config.logging import get_logger
from lice.errors import TemplateError
from lice.text.indent import IndentStyle

logger = get_logger(__name__)


@click.command(
    name="edit",
    help="Add a license notice to the head of each FILE.",
    epilog="""
Indent styles: guess (default), hash, slash, star, sstar, xml, none.
See 'lice styles' for the markers each style uses.
""",
)
@license_option
@click.option(
    "-i",
    "--indent",
    "indent",
    type=click.Choice([s.value for s in IndentStyle]),
    default=None,
    help="Comment style for the notice (default: guess from the file extension).",
)
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path))
@render_context_options
def edit_command(
    *,
    slug: str | None,
    indent: str | None,
    files: tuple[Path, ...],
    author: str | None,
    project: str | None,
    date_value: dt.datetime | None,
) -> None:
    """Insert the selected license notice into FILES."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    config = build_config(
        ctx, author=author, project=project, date=date_value, license=slug, indent=indent
    )
    entry = resolve_license(ctx, config)

    if not entry.has_per_file:
        if vlevel >= 0:
            console.warn(f"License {entry.name!r} has no per-file notice; no files changed.")
        return

    try:
        batch = annotate_paths(entry, config.render_context(), files, style=config.indent)
    except TemplateError as exc:
        raise cli_error_from(exc, action="Rendering notice") from exc

    for result in batch.results:
        if result.status is AnnotationStatus.FAILED:
            console.error(f"Editing {result.path}: {result.error} [skipped]")
        elif vlevel < 0:
            continue
        elif result.status is AnnotationStatus.INSERTED:
            console.info(f"Added {entry.name} to {result.path}")
        else:
            console.info(f"Left {result.path} unchanged (empty notice)")

    if not batch.ok:
        logger.debug("%d of %d files failed", len(batch.failed), len(batch.results))
        ctx.exit(ExitCode.FAILURE)
