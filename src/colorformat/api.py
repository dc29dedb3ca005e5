# topmark:header:start
#
#   project      : ColorFormat
#   file         : api.py
#   file_relpath : src/colorformat/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points layered on the directive scanner.

- `write`: render, then restore the captured default colors (unless
  ``restore=False``).
- `write_line`: same, followed by one newline when the render succeeded.
- `validate`: dry run into a `RecordingSink`; nothing reaches a real sink.

All three return a `ScanResult`; none of them raise on format errors.

Example:
    ```python
    from colorformat.api import write_line
    from colorformat.sink import AnsiSink, TermColor, TerminalColors

    sink = AnsiSink()
    defaults = TerminalColors.capture(sink)
    write_line("%0error:%1 disk full", [TermColor.RED, TermColor.WHITE],
               sink=sink, defaults=defaults)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from colorformat.config.logging import get_logger
from colorformat.scanner.engine import scan
from colorformat.scanner.signs import DEFAULT_SIGNS
from colorformat.sink.recording import RecordingSink

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colorformat.config.logging import ColorformatLogger
    from colorformat.scanner.signs import Signs
    from colorformat.scanner.types import ScanResult
    from colorformat.sink.api import OutputSink
    from colorformat.sink.colors import TermColor
    from colorformat.sink.defaults import TerminalColors

logger: ColorformatLogger = get_logger(__name__)


def write(
    text: str,
    colors: Sequence[TermColor],
    *,
    sink: OutputSink,
    defaults: TerminalColors,
    restore: bool = True,
    signs: Signs = DEFAULT_SIGNS,
) -> ScanResult:
    """Render `text` to `sink` and restore `defaults` afterwards.

    Restoration happens on every exit path, including a failed scan, unless
    `restore` is False.

    Args:
        text (str): The format string.
        colors (Sequence[TermColor]): Color arguments referenced by directives.
        sink (OutputSink): Destination.
        defaults (TerminalColors): Colors to restore after rendering.
        restore (bool): Whether to restore `defaults`.
        signs (Signs): Sign characters to recognize.

    Returns:
        ScanResult: The scan outcome.
    """
    with defaults.restoring(sink, enabled=restore):
        result: ScanResult = scan(text, colors, sink, signs=signs)
    if not result.ok:
        logger.info("Render stopped early: %s", result.error)
    return result


def write_line(
    text: str,
    colors: Sequence[TermColor],
    *,
    sink: OutputSink,
    defaults: TerminalColors,
    restore: bool = True,
    signs: Signs = DEFAULT_SIGNS,
) -> ScanResult:
    """Like `write`, then write a newline if the scan succeeded.

    The newline is written after the colors were restored, so the next line
    starts in the default colors.

    Returns:
        ScanResult: The scan outcome.
    """
    result: ScanResult = write(
        text, colors, sink=sink, defaults=defaults, restore=restore, signs=signs
    )
    if result.ok:
        sink.write_char("\n")
    return result


def validate(
    text: str,
    colors: Sequence[TermColor],
    *,
    signs: Signs = DEFAULT_SIGNS,
) -> ScanResult:
    """Check `text` against `colors` without rendering anything.

    Args:
        text (str): The format string.
        colors (Sequence[TermColor]): Color arguments referenced by directives.
        signs (Signs): Sign characters to recognize.

    Returns:
        ScanResult: What a real render would report.
    """
    return scan(text, colors, RecordingSink(), signs=signs)
