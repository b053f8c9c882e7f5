# topmark:header:start
#
#   project      : Lice
#   file         : main.py
#   file_relpath : src/lice/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Click entry point for Lice.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console, verbosity, merged configuration and license
registry from there (see `lice.cli.cmd_common`).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from lice.cli.commands.edit import edit_command
from lice.cli.commands.list_licenses import list_command
from lice.cli.commands.styles import styles_command
from lice.cli.commands.version import version_command
from lice.cli.commands.view import view_command
from lice.cli.commands.write import write_command
from lice.cli.console import ClickConsole
from lice.cli.errors import cli_error_from
from lice.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from lice.config.logging import get_logger, resolve_env_log_level, setup_logging
from lice.config.model import MutableConfig
from lice.errors import ConfigError
from lice.licenses import default_registry

if TYPE_CHECKING:
    from lice.config.logging import LiceLogger

logger: LiceLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit config file from ``--config``.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["registry"] = default_registry()

    try:
        ctx.obj["config"] = MutableConfig.load(extra=config_path)
    except ConfigError as exc:
        raise cli_error_from(exc, action="Loading configuration") from exc


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Generate license text and add license notices to source files.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Extra TOML config file applied after discovered ones.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the Lice CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'lice list' to see the available licenses.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(list_command)

cli.add_command(view_command)

cli.add_command(write_command)

cli.add_command(edit_command)

cli.add_command(styles_command)

if __name__ == "__main__":
    cli()
