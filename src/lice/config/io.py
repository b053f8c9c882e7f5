# topmark:header:start
#
#   project      : Lice
#   file         : io.py
#   file_relpath : src/lice/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Load TOML configuration sources.

Lice reads its settings from ``lice.toml`` or from the ``[tool.lice]`` table
of ``pyproject.toml``. Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from lice.config.logging import get_logger
from lice.constants import LICE_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from lice.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from lice.config.logging import LiceLogger

TomlTable = dict[str, Any]

logger: LiceLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``lice.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_lice_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Lice settings held by a parsed config file.

    For ``pyproject.toml`` this is the ``[tool.lice]`` table (None if absent);
    for any other file the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if table is None:
        logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return cast("TomlTable", table)


def discover_config_files(start: Path) -> list[Path]:
    """Return config files found by walking upward from ``start``.

    Files are ordered root-most first, nearest last, so a later merge gives the
    nearest file precedence. Within a directory ``pyproject.toml`` comes before
    ``lice.toml``. A file setting ``root = true`` stops the walk after its
    directory.

    Args:
        start (Path): Directory (or file) where discovery starts.

    Returns:
        list[Path]: Discovered config files in merge order.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        found: list[Path] = []
        stop_here = False
        for name in (PYPROJECT_TOML_NAME, LICE_TOML_NAME):
            p = cur / name
            if not p.is_file():
                continue
            try:
                table = extract_lice_table(p, load_toml_dict(p))
            except ConfigError as e:
                logger.warning("Skipping config file %s: %s", p, e)
                continue
            if table is None:
                continue
            logger.debug("Discovered config file: %s", p)
            found.append(p)
            if table.get("root") is True:
                stop_here = True
        if found:
            per_dir.append(found)
        if stop_here or cur.parent == cur:
            break
        cur = cur.parent

    ordered: list[Path] = []
    for entries in reversed(per_dir):
        ordered.extend(entries)
    return ordered
