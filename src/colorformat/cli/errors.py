# topmark:header:start
#
#   project      : ColorFormat
#   file         : errors.py
#   file_relpath : src/colorformat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ColorFormat CLI.

Raise these from commands to exit with a standardized message and exit code.
They prefer the project console stored on the Click context (see `show()`);
without one they fall back to Click's default display.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from colorformat.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from colorformat.scanner.types import FormatError


class ColorformatError(click.ClickException):
    """Base class for all ColorFormat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain message; color is applied by `show()`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error through the project console when one is available."""
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class ColorformatUsageError(ColorformatError):
    """Invalid combination of flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class ColorformatConfigError(ColorformatError):
    """Missing, malformed or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class ColorformatFileNotFoundError(ColorformatError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ColorformatFormatError(ColorformatError):
    """The format string could not be rendered.

    Args:
        error (FormatError): The scanner error.

    Attributes:
        error (FormatError): The scanner error.
    """

    exit_code = ExitCode.FORMAT_ERROR

    def __init__(self, error: FormatError) -> None:
        super().__init__(error.message)
        self.error = error


class ColorformatUnexpectedError(ColorformatError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
