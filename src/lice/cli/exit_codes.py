# topmark:header:start
#
#   project      : Lice
#   file         : exit_codes.py
#   file_relpath : src/lice/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Exit codes for the Lice CLI.

Lice aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Lice CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure, e.g. one or more files in an ``edit`` batch
            could not be annotated.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, unknown
            license). Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A license template could not be rendered. Mirrors BSD
            ``EX_DATAERR (65)``.
        CANT_CREATE: Output file exists and overwriting was not allowed. Mirrors
            BSD ``EX_CANTCREAT (73)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    CANT_CREATE = 73  # EX_CANTCREAT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
