# topmark:header:start
#
#   project      : Lice
#   file         : cmd_common.py
#   file_relpath : src/lice/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Helpers shared by Lice subcommands.

Subcommands read the shared state placed in ``ctx.obj`` by the group callback
(see `lice.cli.main.init_common_state`): the console, the verbosity level, the
merged `MutableConfig`, and the license registry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lice.cli.errors import LiceUsageError, cli_error_from
from lice.config.logging import get_logger
from lice.errors import ConfigError, UnknownLicenseError

if TYPE_CHECKING:
    import click

    from lice.cli.console import ClickConsole
    from lice.config.logging import LiceLogger
    from lice.config.model import Config, MutableConfig
    from lice.licenses.model import LicenseEntry
    from lice.licenses.registry import LicenseRegistry

logger: LiceLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (negative when quiet)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_registry(ctx: click.Context) -> LicenseRegistry:
    """Return the license registry stored on the Click context."""
    return ctx.obj["registry"]


def build_config(ctx: click.Context, **overrides: Any) -> Config:
    """Apply CLI overrides to the loaded config and freeze it.

    Args:
        ctx (click.Context): Current Click context.
        **overrides (Any): CLI values (``author``, ``project``, ``license``,
            ``indent``, ``date``); None means "not given".

    Returns:
        Config: The effective configuration for this command.
    """
    draft: MutableConfig = ctx.obj["config"]
    try:
        config = draft.apply_args(overrides).freeze()
    except ConfigError as exc:
        raise cli_error_from(exc, action="Applying options") from exc
    logger.debug("Effective config: %s", config)
    return config


def resolve_license(ctx: click.Context, config: Config) -> LicenseEntry:
    """Look up the license selected by ``-L`` or the config.

    Raises:
        LiceUsageError: If no license was selected or the slug is unknown.
    """
    if not config.license:
        raise LiceUsageError("You must specify a license to use with -L (see 'lice list')")
    try:
        return get_registry(ctx).get(config.license)
    except UnknownLicenseError as exc:
        raise cli_error_from(exc, action="Looking up license") from exc
