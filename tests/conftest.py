# topmark:header:start
#
#   project      : ColorFormat
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ColorFormat test suite.

Sets up shared fixtures (recording sink, a full palette) and enables TRACE
logging so scanner decisions show up in failure reports.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from colorformat.config import logging
from colorformat.sink.colors import TermColor
from colorformat.sink.recording import RecordingSink

F = TypeVar("F", bound=Callable[..., object])

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

# Sixteen distinct colors, so tests can address indices 0..15.
PALETTE: tuple[TermColor, ...] = tuple(TermColor)


@pytest.fixture(autouse=True)
def isolated_colorformat_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset logging and drop environment overrides before every test.

    CLI invocations reconfigure the root logger against the runner's captured
    streams, so each test starts from a fresh TRACE handler on the current stderr.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def sink() -> RecordingSink:
    """Return a fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def palette() -> tuple[TermColor, ...]:
    """Return the sixteen terminal colors in declaration order."""
    return PALETTE
