# topmark:header:start
#
#   project      : Lice
#   file         : view.py
#   file_relpath : src/lice/cli/commands/view.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice `view` command.

Renders the full text of a license to stdout.
"""

from __future__ import annotations

import datetime as dt

import click

from lice.cli.cmd_common import build_config, get_console, resolve_license
from lice.cli.errors import cli_error_from
from lice.cli.options import render_context_options
from lice.errors import TemplateError
from lice.licenses.render import render_body


@click.command(
    name="view",
    help="Print the text of a license.",
)
@click.argument("slug", metavar="SLUG")
@render_context_options
def view_command(
    *,
    slug: str,
    author: str | None,
    project: str | None,
    date_value: dt.datetime | None,
) -> None:
    """Print the text of the license named by SLUG."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    config = build_config(ctx, author=author, project=project, date=date_value, license=slug)
    entry = resolve_license(ctx, config)

    try:
        text = render_body(entry, config.render_context())
    except TemplateError as exc:
        raise cli_error_from(exc, action="Rendering license") from exc
    console.print(text, nl=False)
