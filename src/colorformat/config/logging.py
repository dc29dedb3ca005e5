# topmark:header:start
#
#   project      : ColorFormat
#   file         : logging.py
#   file_relpath : src/colorformat/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for ColorFormat.

Adds a TRACE level below DEBUG (used by the scanner to report every applied
directive), a logger class exposing ``.trace()``, and a formatter that colors
records by severity with `yachalk`.

Program output never goes through logging; the CLI writes it via its console.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "COLORFORMAT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ColorformatLogger(logging.Logger):
    """Logger with an extra ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message (format string).
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(ColorformatLogger)


# Severity thresholds, highest first; the first threshold <= record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring the whole record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format `record` and colorize it.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Translate a level name (``"trace"``, ``"WARN"``) or number (``"10"``).

    Args:
        value (str | None): Raw level text.

    Returns:
        int | None: The numeric level, or None when `value` is empty or unknown.
    """
    if not value:
        return None
    key: str = value.strip().upper()
    if key.isdigit():
        return int(key)
    return LEVEL_NAMES.get(key)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``COLORFORMAT_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the root logger with a single colorized handler.

    Args:
        level (int | None): Level to use. When None, the environment is consulted
            via `resolve_env_log_level`; the fallback is CRITICAL.
        stream (TextIO | None): Destination of log records. Defaults to `sys.stderr`
            so diagnostics never mix with rendered output.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> ColorformatLogger:
    """Return the `ColorformatLogger` named `name`.

    Args:
        name (str): Logger name, usually ``__name__``.

    Returns:
        ColorformatLogger: The logger.
    """
    return cast("ColorformatLogger", logging.getLogger(name))
