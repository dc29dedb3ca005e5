# topmark:header:start
#
#   project      : ColorFormat
#   file         : test_recording.py
#   file_relpath : tests/sink/test_recording.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the recording sink."""

from __future__ import annotations

from colorformat.sink.colors import TermColor
from colorformat.sink.recording import RecordingSink, SinkEvent


def test_records_calls_in_order(sink: RecordingSink) -> None:
    sink.write_char("a")
    sink.set_foreground(TermColor.RED)
    sink.set_background(TermColor.WHITE)
    sink.write_char("b")

    assert sink.events == [
        SinkEvent("write", "a"),
        SinkEvent("fg", TermColor.RED),
        SinkEvent("bg", TermColor.WHITE),
        SinkEvent("write", "b"),
    ]
    assert sink.text == "ab"
    assert sink.color_changes == [SinkEvent.fg(TermColor.RED), SinkEvent.bg(TermColor.WHITE)]


def test_tracks_current_colors(sink: RecordingSink) -> None:
    assert sink.foreground is None
    assert sink.background is None

    sink.set_foreground(TermColor.GREEN)
    sink.set_background(TermColor.BLACK)

    assert sink.foreground is TermColor.GREEN
    assert sink.background is TermColor.BLACK


def test_clear_keeps_colors(sink: RecordingSink) -> None:
    sink.set_foreground(TermColor.YELLOW)
    sink.write_char("x")

    sink.clear()

    assert sink.events == []
    assert sink.foreground is TermColor.YELLOW


def test_initial_colors() -> None:
    sink = RecordingSink(foreground=TermColor.WHITE, background=TermColor.BLUE)

    assert sink.foreground is TermColor.WHITE
    assert sink.background is TermColor.BLUE
    assert sink.events == []
