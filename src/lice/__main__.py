# topmark:header:start
#
#   project      : Lice
#   file         : __main__.py
#   file_relpath : src/lice/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Module entry point for running Lice via ``python -m lice``.

Equivalent to running the ``lice`` console script; it delegates to
:func:`lice.cli.main.cli`.

Examples:
    Stamp two files with the MIT per-file notice::

        python -m lice edit -L mit-expat main.py util.go
"""

from __future__ import annotations

from lice.cli.main import cli

if __name__ == "__main__":
    cli()
