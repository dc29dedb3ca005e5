# topmark:header:start
#
#   project      : ColorFormat
#   file         : ansi.py
#   file_relpath : src/colorformat/sink/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI terminal sink backed by Click.

`AnsiSink` writes literal characters with `click.echo` and turns color changes
into ANSI SGR sequences produced by `click.style`. When color is disabled the
sink still tracks the active colors (so defaults can be captured and restored)
but only literal text reaches the stream.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

if TYPE_CHECKING:
    from colorformat.sink.colors import TermColor

ANSI_RESET: str = click.style("", reset=True)


class AnsiSink:
    """Stream sink emitting ANSI color sequences.

    Args:
        out (TextIO | None): Destination stream. Defaults to `sys.stdout`.
        enable_color (bool): If False, color changes are tracked but not emitted.

    Attributes:
        out (TextIO): Destination stream.
        enable_color (bool): Whether ANSI sequences are written.
    """

    out: TextIO
    enable_color: bool

    def __init__(self, out: TextIO | None = None, *, enable_color: bool = True) -> None:
        self.out = out or sys.stdout
        self.enable_color = enable_color
        self._foreground: TermColor | None = None
        self._background: TermColor | None = None

    @property
    def foreground(self) -> TermColor | None:
        """Return the active foreground color (None means terminal default)."""
        return self._foreground

    @property
    def background(self) -> TermColor | None:
        """Return the active background color (None means terminal default)."""
        return self._background

    def _emit(self, text: str) -> None:
        click.echo(text, nl=False, file=self.out, color=self.enable_color)

    def _emit_sgr(self, *, fg: TermColor | None = None, bg: TermColor | None = None) -> None:
        if not self.enable_color:
            return
        self._emit(
            click.style(
                "",
                fg=fg.value if fg is not None else None,
                bg=bg.value if bg is not None else None,
                reset=False,
            )
        )

    def write_char(self, char: str) -> None:
        """Write one character in the active colors.

        Args:
            char (str): The character to write.
        """
        self._emit(char)

    def set_foreground(self, color: TermColor | None) -> None:
        """Set the foreground color.

        Setting `None` resets the terminal and re-applies the background.

        Args:
            color (TermColor | None): The new foreground color.
        """
        self._foreground = color
        if color is None:
            self.reset()
            return
        self._emit_sgr(fg=color)

    def set_background(self, color: TermColor | None) -> None:
        """Set the background color.

        Setting `None` resets the terminal and re-applies the foreground.

        Args:
            color (TermColor | None): The new background color.
        """
        self._background = color
        if color is None:
            self.reset()
            return
        self._emit_sgr(bg=color)

    def reset(self) -> None:
        """Emit an ANSI reset, then re-apply whichever slot is still set."""
        if not self.enable_color:
            return
        self._emit(ANSI_RESET)
        if self._foreground is not None or self._background is not None:
            self._emit_sgr(fg=self._foreground, bg=self._background)

    def __repr__(self) -> str:
        return (
            f"AnsiSink(fg={self._foreground!r}, bg={self._background!r}, "
            f"enable_color={self.enable_color})"
        )
