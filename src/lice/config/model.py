# topmark:header:start
#
#   project      : Lice
#   file         : model.py
#   file_relpath : src/lice/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by commands.
    - `MutableConfig`: a mutable builder used while layering sources; it can be
      frozen into `Config` and thawed back for edits.

Layering (later wins):
    1. Runtime defaults (author discovered from the current user).
    2. Discovered config files, root-most first (``pyproject.toml`` ``[tool.lice]``,
       then ``lice.toml`` in each directory).
    3. An explicit ``--config`` file.
    4. CLI options.

Recognized keys: ``author``, ``project``, ``license``, ``indent``, ``date``
and ``root`` (stops discovery). Unknown keys are logged and ignored.
"""

from __future__ import annotations

import datetime as dt
import getpass
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from lice.config.io import discover_config_files, extract_lice_table, load_toml_dict
from lice.config.logging import get_logger
from lice.constants import DATE_LAYOUT
from lice.errors import ConfigError
from lice.licenses.model import RenderContext
from lice.text.indent import IndentStyle

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lice.config.io import TomlTable
    from lice.config.logging import LiceLogger

logger: LiceLogger = get_logger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset({"author", "project", "license", "indent", "date", "root"})


def default_author() -> str | None:
    """Return the current user's full name, falling back to the login name.

    Returns:
        str | None: The author name, or None if it cannot be determined.
    """
    if sys.platform != "win32":
        import pwd

        try:
            gecos: str = pwd.getpwuid(os.getuid()).pw_gecos
        except KeyError:
            gecos = ""
        name = gecos.split(",")[0].strip()
        if name:
            return name
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        logger.warning("Unable to determine the current user")
        return None


def parse_date(value: object, *, source: str = "config") -> dt.date:
    """Coerce a TOML or CLI value into a date.

    Args:
        value (object): A `datetime.date`, `datetime.datetime`, or a
            ``YYYY-MM-DD`` string.
        source (str): Where the value came from, for error messages.

    Returns:
        dt.date: The parsed date.

    Raises:
        ConfigError: If the value is not a date.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.datetime.strptime(value.strip(), DATE_LAYOUT).date()
        except ValueError as e:
            raise ConfigError(f"Invalid date {value!r} in {source} (expected YYYY-MM-DD)") from e
    raise ConfigError(f"Invalid date {value!r} in {source}")


def _get_str(data: TomlTable, key: str, source: str) -> str | None:
    value: Any = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' in {source} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        author (str | None): Copyright holder; None when unknown.
        project (str | None): Project name, if different from the author.
        license (str | None): Default license slug.
        indent (IndentStyle): Indent style for edited files.
        date (dt.date | None): Fixed copyright date; None means today.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    author: str | None = None
    project: str | None = None
    license: str | None = None
    indent: IndentStyle = IndentStyle.GUESS
    date: dt.date | None = None
    config_files: tuple[Path, ...] = ()

    def timestamp(self) -> dt.datetime:
        """Return the point in time substituted into templates."""
        if self.date is None:
            return dt.datetime.now()
        return dt.datetime.combine(self.date, dt.time())

    def render_context(self) -> RenderContext:
        """Build the template render context for this configuration."""
        return RenderContext(author=self.author, project=self.project, time=self.timestamp())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            author=self.author,
            project=self.project,
            license=self.license,
            indent=self.indent,
            date=self.date,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while layering sources.

    Fields left as None inherit from the layer below when merged.
    """

    author: str | None = None
    project: str | None = None
    license: str | None = None
    indent: IndentStyle | None = None
    date: dt.date | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`."""
        return Config(
            author=self.author or None,
            project=self.project or None,
            license=self.license or None,
            indent=self.indent or IndentStyle.GUESS,
            date=self.date,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        return MutableConfig(
            author=other.author if other.author is not None else self.author,
            project=other.project if other.project is not None else self.project,
            license=other.license if other.license is not None else self.license,
            indent=other.indent if other.indent is not None else self.indent,
            date=other.date if other.date is not None else self.date,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Return a new builder with fields overridden by CLI-style arguments.

        Args:
            args (Mapping[str, Any]): Keys among ``author``, ``project``,
                ``license``, ``indent``, ``date``.

        Returns:
            MutableConfig: The merged builder; None values in ``args`` are ignored.
        """
        overrides = MutableConfig(
            author=args.get("author"),
            project=args.get("project"),
            license=args.get("license"),
            indent=IndentStyle(args["indent"]) if args.get("indent") is not None else None,
            date=parse_date(args["date"], source="arguments")
            if args.get("date") is not None
            else None,
        )
        return self.merge_with(overrides)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the runtime defaults."""
        return cls(author=default_author(), indent=IndentStyle.GUESS)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a builder from the Lice table of a config file.

        Args:
            data (TomlTable): The ``lice.toml`` document or ``[tool.lice]`` table.
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The parsed settings.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        source = str(config_file) if config_file else "config"
        for key in data:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown key %r in %s", key, source)

        indent_raw = _get_str(data, "indent", source)
        try:
            indent = IndentStyle(indent_raw) if indent_raw is not None else None
        except ValueError as e:
            choices = ", ".join(s.value for s in IndentStyle)
            raise ConfigError(
                f"Invalid indent style {indent_raw!r} in {source} (expected one of: {choices})"
            ) from e

        raw_date: Any = data.get("date")
        return cls(
            author=_get_str(data, "author", source),
            project=_get_str(data, "project", source),
            license=_get_str(data, "license", source),
            indent=indent,
            date=parse_date(raw_date, source=source) if raw_date is not None else None,
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load settings from a single TOML file.

        Args:
            path (Path): ``lice.toml``, ``pyproject.toml``, or another TOML file.

        Returns:
            MutableConfig | None: The settings, or None if a ``pyproject.toml``
            has no ``[tool.lice]`` table.
        """
        logger.debug("Loading config from %s", path)
        table = extract_lice_table(path, load_toml_dict(path))
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def load(cls, *, start: Path | None = None, extra: Path | None = None) -> MutableConfig:
        """Layer defaults, discovered config files and an explicit config file.

        Args:
            start (Path | None): Directory where discovery starts (default: CWD).
            extra (Path | None): Explicit config file applied last.

        Returns:
            MutableConfig: The merged settings.
        """
        draft = cls.from_defaults()
        files = discover_config_files(start or Path.cwd())
        if extra is not None:
            files.append(extra)
        for path in files:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        logger.debug("Merged config: %s", draft)
        return draft
