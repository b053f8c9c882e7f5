# topmark:header:start
#
#   project      : Lice
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Pytest configuration for the Lice test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `lice.config.model.MutableConfig`, then `freeze()` them into a
    `lice.config.model.Config`. Do not mutate a frozen `Config`; call
    `Config.thaw()` and freeze again instead.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from lice.config import logging
from lice.licenses.model import LicenseEntry, RenderContext

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_lice_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Lice's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to
            manipulate environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failures come with full diagnostics.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# Fixed point in time so rendered years are predictable.
FIXED_TIME: dt.datetime = dt.datetime(2013, 6, 1, 12, 0, 0)


def make_context(**overrides: Any) -> RenderContext:
    """Return a render context with a fixed author and time.

    Args:
        **overrides (Any): Field overrides (``author``, ``project``, ``time``).

    Returns:
        RenderContext: The context.
    """
    values: dict[str, Any] = {"author": "Alice Example", "project": None, "time": FIXED_TIME}
    values.update(overrides)
    return RenderContext(**values)


def make_entry(**overrides: Any) -> LicenseEntry:
    """Return a small license entry for tests.

    Args:
        **overrides (Any): Field overrides.

    Returns:
        LicenseEntry: The entry.
    """
    values: dict[str, Any] = {
        "name": "Test License",
        "slug": "test",
        "text": "Copyright {{ date('%Y') }} {{ author }}\n\nDo as you please.\n",
        "per_file": "Copyright {{ date('%Y') }} {{ author }}.\nUse as you please.\n",
    }
    values.update(overrides)
    return LicenseEntry(**values)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated working directory that stops config discovery.

    The directory holds a ``lice.toml`` with ``root = true`` so config files
    above ``tmp_path`` never leak into the test.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "lice.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd
