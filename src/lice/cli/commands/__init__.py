# topmark:header:start
#
#   project      : Lice
#   file         : __init__.py
#   file_relpath : src/lice/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Lice CLI subcommands."""
