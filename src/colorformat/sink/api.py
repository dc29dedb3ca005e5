# topmark:header:start
#
#   project      : ColorFormat
#   file         : api.py
#   file_relpath : src/colorformat/sink/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sink interface used by the directive scanner.

The scanner depends on three synchronous operations only: write a character,
set the foreground, set the background. The current colors are readable so a
host can snapshot them (see `colorformat.sink.defaults.TerminalColors`).

A color of `None` stands for the terminal's own default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from colorformat.sink.colors import TermColor


class OutputSink(Protocol):
    """Minimal interface of a color-capable output destination.

    Implementations may write ANSI sequences to a stream, record calls for
    inspection, or drive any other display. No buffering contract is assumed.
    """

    @property
    def foreground(self) -> TermColor | None:
        """Return the active foreground color."""
        ...

    @property
    def background(self) -> TermColor | None:
        """Return the active background color."""
        ...

    def write_char(self, char: str) -> None:
        """Write a single character in the active colors."""
        ...

    def set_foreground(self, color: TermColor | None) -> None:
        """Change the foreground color for subsequent characters."""
        ...

    def set_background(self, color: TermColor | None) -> None:
        """Change the background color for subsequent characters."""
        ...
