# topmark:header:start
#
#   project      : Lice
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""CLI test helpers for running Lice through Click's test runner.

Tests that touch files should request the `isolation` fixture (see
``tests/conftest.py``) so relative paths resolve inside a temporary project
whose ``lice.toml`` stops config discovery.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from lice.cli.exit_codes import ExitCode
from lice.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory with color disabled.

    Args:
        argv (str | Sequence[str] | None): CLI arguments after the program name,
            e.g. ``["view", "isc"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["list"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    args: list[str] = ["--no-color"]
    if isinstance(argv, str):
        args.append(argv)
    elif argv:
        args.extend(argv)
    runner = CliRunner()
    return runner.invoke(cli, args, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): The expected exit code.
    """
    assert result.exit_code == code, result.output
