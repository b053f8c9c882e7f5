# topmark:header:start
#
#   project      : Lice
#   file         : styles.py
#   file_relpath : src/lice/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice `styles` command.

Lists the indent styles accepted by ``lice edit --indent`` and, with ``-v``,
the file extensions that ``guess`` maps to each style.
"""

from __future__ import annotations

import click

from lice.cli.cmd_common import get_console, get_effective_verbosity
from lice.text.indent import GUESS_BY_EXTENSION, INDENT_RULES, IndentStyle


@click.command(
    name="styles",
    help="List the available indent styles.",
)
def styles_command() -> None:
    """List the available indent styles."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    width = max(len(s.value) for s in IndentStyle)
    console.print(f"{IndentStyle.GUESS.value:<{width}}  (infer from the file extension)")
    for style, rule in INDENT_RULES.items():
        line = f"{style.value:<{width}}  {rule.describe()}"
        if vlevel > 0:
            exts = sorted(ext or "(none)" for ext, s in GUESS_BY_EXTENSION.items() if s is style)
            if exts:
                line += f"  [{', '.join(exts)}]"
        console.print(line)
