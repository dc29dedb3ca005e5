# topmark:header:start
#
#   project      : ColorFormat
#   file         : engine.py
#   file_relpath : src/colorformat/scanner/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive scanner: the single pass that renders a format string to a sink.

The scanner walks the format string with an explicit index so that it can look
ahead and jump over bracketed arguments and stop segments. Every character is
either written to the sink or consumed as part of a recognized construct:

- ``%N`` / ``&N``: set foreground / background to ``colors[N]`` (single digit).
- ``%{N}`` / ``&{N}``: same, for any non-negative integer ``N``.
- ``~text~``: write ``text`` literally, directives inside are not interpreted.
- ``~~``: write one literal ``~``.

Output is streamed. A failure stops the scan immediately and leaves whatever
was already written (and whatever colors were applied) on the sink; the error
is returned in the `ScanResult`, never raised.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from colorformat.config.logging import get_logger
from colorformat.scanner.controller import apply_color
from colorformat.scanner.resolver import resolve_argument
from colorformat.scanner.signs import ASCII_DIGITS, DEFAULT_SIGNS
from colorformat.scanner.types import (
    ColorSlot,
    Directive,
    FormatError,
    FormatErrorKind,
    ScanResult,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colorformat.config.logging import ColorformatLogger
    from colorformat.scanner.signs import Signs
    from colorformat.sink.api import OutputSink
    from colorformat.sink.colors import TermColor

logger: ColorformatLogger = get_logger(__name__)

MAX_DETAIL_LENGTH: int = 24
MAX_INDEX_DIGITS: int = len(str(sys.maxsize))


def _shorten(raw: str) -> str:
    if len(raw) <= MAX_DETAIL_LENGTH:
        return raw
    return f"{raw[:MAX_DETAIL_LENGTH]}... ({len(raw)} chars)"


class DirectiveScanner:
    """State for one scan: the cursor plus output counters.

    Instances are single-use; call `run()` once. Prefer the `scan()` function.

    Args:
        text (str): The format string.
        colors (Sequence[TermColor]): Color arguments referenced by directives.
        sink (OutputSink): Destination for characters and color changes.
        signs (Signs): Sign characters to recognize.
    """

    def __init__(
        self,
        text: str,
        colors: Sequence[TermColor],
        sink: OutputSink,
        signs: Signs = DEFAULT_SIGNS,
    ) -> None:
        self.text: str = text
        self.colors: Sequence[TermColor] = colors
        self.sink: OutputSink = sink
        self.signs: Signs = signs
        self.pos: int = 0
        self.written: int = 0
        self.applied: int = 0

    def run(self) -> ScanResult:
        """Scan the whole format string.

        Returns:
            ScanResult: Counters plus the error that aborted the scan, if any.
        """
        text: str = self.text
        length: int = len(text)
        directive_signs: tuple[str, str] = self.signs.directive_signs

        while self.pos < length:
            char: str = text[self.pos]
            if char == self.signs.stop:
                self._scan_stop_segment()
                continue
            if char in directive_signs:
                error: FormatError | None = self._scan_directive()
                if error is not None:
                    logger.debug("Scan aborted: %s", error.message)
                    return self._result(error)
                continue
            self._write(char)
            self.pos += 1

        return self._result()

    def _result(self, error: FormatError | None = None) -> ScanResult:
        return ScanResult(error=error, written=self.written, directives=self.applied)

    def _write(self, chars: str) -> None:
        for char in chars:
            self.sink.write_char(char)
        self.written += len(chars)

    def _scan_stop_segment(self) -> None:
        """Handle a stop sign at the cursor; always advances the cursor."""
        text: str = self.text
        length: int = len(text)
        start: int = self.pos
        stop: str = self.signs.stop

        # A trailing stop sign has nothing to escape.
        if start == length - 1:
            self._write(stop)
            self.pos = length
            return

        if text[start + 1] == stop:
            self._write(stop)
            self.pos = start + 2
            return

        end: int = text.find(stop, start + 1)
        if end == -1:
            # Unclosed segment: the rest of the string is literal.
            self._write(text[start + 1 :])
            self.pos = length
            return

        self._write(text[start + 1 : end])
        self.pos = end + 1

    def _scan_directive(self) -> FormatError | None:
        """Handle a directive sign at the cursor; always advances on success."""
        text: str = self.text
        length: int = len(text)
        start: int = self.pos
        sign: str = text[start]
        slot: ColorSlot = ColorSlot.FOREGROUND if sign == self.signs.fore else ColorSlot.BACKGROUND

        if start + 1 < length:
            following: str = text[start + 1]

            if following in ASCII_DIGITS:
                error = self._apply(Directive(slot, int(following)), position=start)
                if error is None:
                    self.pos = start + 2
                return error

            if following == self.signs.open_bracket and start + 2 < length:
                close: int = text.find(self.signs.close_bracket, start + 2)
                if close == -1:
                    return FormatError(kind=FormatErrorKind.UNTERMINATED_BRACKET, position=start)
                raw: str = text[start + 2 : close]
                if not raw or any(c not in ASCII_DIGITS for c in raw):
                    return FormatError(
                        kind=FormatErrorKind.INVALID_ARGUMENT_FORMAT,
                        position=start,
                        detail=_shorten(raw),
                    )
                digits: str = raw.lstrip("0") or "0"
                # no sequence is longer than sys.maxsize
                if len(digits) > MAX_INDEX_DIGITS:
                    return FormatError(
                        kind=FormatErrorKind.ARGUMENT_INDEX_OUT_OF_RANGE,
                        position=start,
                        detail=_shorten(digits),
                    )
                error = self._apply(Directive(slot, int(digits)), position=start)
                if error is None:
                    self.pos = close + 1
                return error

        # Not a directive: the sign is ordinary text.
        self._write(sign)
        self.pos = start + 1
        return None

    def _apply(self, directive: Directive, *, position: int) -> FormatError | None:
        color, error = resolve_argument(directive.index, self.colors, position=position)
        if error is not None:
            return error
        logger.trace(
            "pos=%d: %s := #%d (%s)", position, directive.slot.value, directive.index, color
        )
        apply_color(directive.slot.is_foreground, color, self.sink)
        self.applied += 1
        return None


def scan(
    text: str,
    colors: Sequence[TermColor],
    sink: OutputSink,
    *,
    signs: Signs = DEFAULT_SIGNS,
) -> ScanResult:
    """Render `text` to `sink`, interpreting color directives.

    Args:
        text (str): The format string.
        colors (Sequence[TermColor]): Ordered color arguments; directive ``%N``
            selects ``colors[N]``.
        sink (OutputSink): Destination for characters and color changes.
        signs (Signs): Sign characters to recognize.

    Returns:
        ScanResult: The outcome. Check `ScanResult.ok` or call
        `ScanResult.raise_for_error()`.

    Example:
        ```python
        sink = RecordingSink()
        scan("%0Hi %1World", [TermColor.RED, TermColor.BLUE], sink)
        sink.text  # 'Hi World'
        ```
    """
    return DirectiveScanner(text, colors, sink, signs).run()
