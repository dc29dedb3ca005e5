# topmark:header:start
#
#   project      : ColorFormat
#   file         : defaults.py
#   file_relpath : src/colorformat/sink/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Captured default colors and scoped restoration.

The host creates one `TerminalColors` value before the first render, usually via
`TerminalColors.capture(sink)`, and passes it to every render call. There is no
hidden process-wide state: whoever owns the sink owns its defaults.

Example:
    ```python
    sink = AnsiSink()
    defaults = TerminalColors.capture(sink)

    with defaults.restoring(sink):
        scan("%0warning", [TermColor.YELLOW], sink)
    # sink is back to its captured colors here, even if the scan failed
    ```
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from colorformat.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from colorformat.config.logging import ColorformatLogger
    from colorformat.sink.api import OutputSink
    from colorformat.sink.colors import TermColor

logger: ColorformatLogger = get_logger(__name__)


@dataclass(frozen=True)
class TerminalColors:
    """Snapshot of a sink's foreground and background colors.

    Attributes:
        foreground (TermColor | None): Default foreground (None = terminal default).
        background (TermColor | None): Default background (None = terminal default).
    """

    foreground: TermColor | None = None
    background: TermColor | None = None

    @classmethod
    def capture(cls, sink: OutputSink) -> TerminalColors:
        """Snapshot the colors currently active on `sink`.

        Args:
            sink (OutputSink): The sink to read.

        Returns:
            TerminalColors: The captured defaults.
        """
        captured = cls(foreground=sink.foreground, background=sink.background)
        logger.debug("Captured default colors: %s", captured)
        return captured

    def restore(self, sink: OutputSink) -> None:
        """Re-apply the captured colors to `sink`.

        Args:
            sink (OutputSink): The sink to restore.
        """
        logger.trace("Restoring default colors: %s", self)
        sink.set_foreground(self.foreground)
        sink.set_background(self.background)

    @contextmanager
    def restoring(self, sink: OutputSink, *, enabled: bool = True) -> Iterator[OutputSink]:
        """Context manager that restores the defaults on every exit path.

        Args:
            sink (OutputSink): The sink to restore on exit.
            enabled (bool): If False, the sink is left in whatever colors the body
                applied.

        Yields:
            OutputSink: The same sink, for convenience.
        """
        try:
            yield sink
        finally:
            if enabled:
                self.restore(sink)
