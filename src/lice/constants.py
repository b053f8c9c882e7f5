# topmark:header:start
#
#   project      : Lice
#   file         : constants.py
#   file_relpath : src/lice/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LICE_VERSION: str = get_version("lice")

# Config file names, in same-directory precedence order (later wins):
PYPROJECT_TOML_NAME: str = "pyproject.toml"
LICE_TOML_NAME: str = "lice.toml"
PYPROJECT_TOOL_SECTION: str = "lice"

# Tab stops used when untabifying template text (non-positive widths fall back to this).
DEFAULT_TAB_WIDTH: int = 4

# strftime layout used to parse and display --date values.
DATE_LAYOUT: str = "%Y-%m-%d"
