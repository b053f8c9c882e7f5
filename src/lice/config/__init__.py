# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice configuration: runtime settings, TOML loading, and logging setup.

Submodules:
    - `lice.config.logging`: loggers and the TRACE level (imported by every module,
      so this package must stay import-light).
    - `lice.config.io`: TOML loading and config file discovery.
    - `lice.config.model`: `Config` / `MutableConfig`.
"""

from __future__ import annotations
