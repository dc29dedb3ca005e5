# topmark:header:start
#
#   project      : ColorFormat
#   file         : recording.py
#   file_relpath : src/colorformat/sink/recording.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory sink that records every call.

Used for dry-run validation (`colorformat.api.validate`) and by the test
suite to assert the exact sequence of writes and color changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from colorformat.sink.colors import TermColor

SinkEventKind = Literal["write", "fg", "bg"]


@dataclass(frozen=True)
class SinkEvent:
    """One recorded sink call.

    Attributes:
        kind (SinkEventKind): Which sink method was called.
        value (str | TermColor | None): The written character, or the color passed
            to a setter (None for the terminal default).
    """

    kind: SinkEventKind
    value: str | TermColor | None

    @classmethod
    def write(cls, char: str) -> SinkEvent:
        """Build the event recorded by `RecordingSink.write_char`."""
        return cls("write", char)

    @classmethod
    def fg(cls, color: TermColor | None) -> SinkEvent:
        """Build the event recorded by `RecordingSink.set_foreground`."""
        return cls("fg", color)

    @classmethod
    def bg(cls, color: TermColor | None) -> SinkEvent:
        """Build the event recorded by `RecordingSink.set_background`."""
        return cls("bg", color)


@dataclass
class RecordingSink:
    """Sink that keeps an ordered log of calls instead of rendering them.

    Attributes:
        events (list[SinkEvent]): Recorded calls, oldest first.
        foreground (TermColor | None): Active foreground color; pass it at
            construction to start from a non-default color.
        background (TermColor | None): Active background color; same as above.
    """

    events: list[SinkEvent] = field(default_factory=lambda: [])
    foreground: TermColor | None = None
    background: TermColor | None = None

    def write_char(self, char: str) -> None:
        """Record a written character.

        Args:
            char (str): The character to record.
        """
        self.events.append(SinkEvent.write(char))

    def set_foreground(self, color: TermColor | None) -> None:
        """Make `color` the active foreground and record the change.

        Args:
            color (TermColor | None): The new foreground color.
        """
        self.foreground = color
        self.events.append(SinkEvent.fg(color))

    def set_background(self, color: TermColor | None) -> None:
        """Make `color` the active background and record the change.

        Args:
            color (TermColor | None): The new background color.
        """
        self.background = color
        self.events.append(SinkEvent.bg(color))

    @property
    def text(self) -> str:
        """Return the concatenation of all written characters."""
        return "".join(str(e.value) for e in self.events if e.kind == "write")

    @property
    def color_changes(self) -> list[SinkEvent]:
        """Return only the foreground/background events."""
        return [e for e in self.events if e.kind != "write"]

    def clear(self) -> None:
        """Forget recorded events; active colors are kept."""
        self.events.clear()
