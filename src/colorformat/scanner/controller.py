# topmark:header:start
#
#   project      : ColorFormat
#   file         : controller.py
#   file_relpath : src/colorformat/scanner/controller.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply a resolved color to one slot of a sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colorformat.sink.api import OutputSink
    from colorformat.sink.colors import TermColor


def apply_color(is_foreground: bool, color: TermColor | None, sink: OutputSink) -> None:
    """Set the foreground or background of `sink` to `color`.

    No validation is done; the color is trusted to come from the resolver.

    Args:
        is_foreground (bool): True for the foreground slot, False for the background.
        color (TermColor | None): The color to apply.
        sink (OutputSink): The sink to update.
    """
    if is_foreground:
        sink.set_foreground(color)
    else:
        sink.set_background(color)
