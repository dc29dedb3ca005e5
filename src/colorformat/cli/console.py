# topmark:header:start
#
#   project      : ColorFormat
#   file         : console.py
#   file_relpath : src/colorformat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for user-facing CLI messages.

The console carries the resolved color decision for the whole invocation and
hands out `AnsiSink` instances bound to the same stdout stream, so rendered
text and status messages agree on whether ANSI sequences are emitted.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from colorformat.cli.console_api import ConsoleLike
from colorformat.sink.ansi import AnsiSink


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): Emit ANSI color codes.
        out (TextIO | None): Standard output stream. Defaults to `sys.stdout`.
        err (TextIO | None): Error stream. Defaults to `sys.stderr`.

    Attributes:
        enable_color (bool): Whether ANSI color codes are emitted.
        out (TextIO): Stream for program output and rendered text.
        err (TextIO): Stream for warnings and errors.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _echo(self, text: str, *, nl: bool, to_err: bool, fg: str | None = None) -> None:
        if fg is not None:
            text = click.style(text, fg=fg)
        click.echo(text, nl=nl, file=self.err if to_err else self.out, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        self._echo(text, nl=nl, to_err=False)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        self._echo(text, nl=nl, to_err=True, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a bright red error to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        self._echo(text, nl=nl, to_err=True, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return `text` styled with `click.style` (plain when color is off).

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments accepted by `click.style`.

        Returns:
            str: The styled or plain text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def sink(self) -> AnsiSink:
        """Return a sink writing to this console's stdout with the same color setting."""
        return AnsiSink(self.out, enable_color=self.enable_color)
