# topmark:header:start
#
#   project      : ColorFormat
#   file         : test_ansi.py
#   file_relpath : tests/sink/test_ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ANSI terminal sink."""

from __future__ import annotations

import io

import pytest

from colorformat.api import write_line
from colorformat.sink.ansi import ANSI_RESET, AnsiSink
from colorformat.sink.colors import TermColor
from colorformat.sink.defaults import TerminalColors


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


def test_reset_sequence() -> None:
    assert ANSI_RESET == "\x1b[0m"


def test_plain_characters(out: io.StringIO) -> None:
    sink = AnsiSink(out)

    for char in "abc":
        sink.write_char(char)

    assert out.getvalue() == "abc"


def test_foreground_and_background_sequences(out: io.StringIO) -> None:
    sink = AnsiSink(out)

    sink.set_foreground(TermColor.RED)
    sink.write_char("x")
    sink.set_background(TermColor.BLUE)
    sink.write_char("y")

    assert out.getvalue() == "\x1b[31mx\x1b[44my"
    assert sink.foreground is TermColor.RED
    assert sink.background is TermColor.BLUE


def test_bright_colors(out: io.StringIO) -> None:
    sink = AnsiSink(out)

    sink.set_foreground(TermColor.BRIGHT_RED)
    sink.set_background(TermColor.BRIGHT_WHITE)

    assert out.getvalue() == "\x1b[91m\x1b[107m"


def test_clearing_a_slot_resets_and_reapplies_the_other(out: io.StringIO) -> None:
    sink = AnsiSink(out)
    sink.set_foreground(TermColor.GREEN)
    sink.set_background(TermColor.BLACK)
    out.truncate(0)
    out.seek(0)

    sink.set_foreground(None)

    assert out.getvalue() == ANSI_RESET + "\x1b[40m"
    assert sink.foreground is None
    assert sink.background is TermColor.BLACK


def test_clearing_both_slots_emits_only_resets(out: io.StringIO) -> None:
    sink = AnsiSink(out)

    sink.set_foreground(None)
    sink.set_background(None)

    assert out.getvalue() == ANSI_RESET * 2


def test_disabled_color_tracks_state_without_escapes(out: io.StringIO) -> None:
    sink = AnsiSink(out, enable_color=False)

    sink.set_foreground(TermColor.MAGENTA)
    sink.write_char("z")
    sink.set_foreground(None)

    assert out.getvalue() == "z"
    assert sink.foreground is None


def test_write_line_renders_and_restores(out: io.StringIO) -> None:
    sink = AnsiSink(out)
    defaults = TerminalColors.capture(sink)

    result = write_line(
        "%0Hi %1World", [TermColor.RED, TermColor.BLUE], sink=sink, defaults=defaults
    )

    assert result.ok
    assert out.getvalue() == "\x1b[31mHi \x1b[34mWorld" + ANSI_RESET + ANSI_RESET + "\n"


def test_repr_mentions_state() -> None:
    sink = AnsiSink(io.StringIO(), enable_color=False)
    sink.set_background(TermColor.CYAN)

    assert "enable_color=False" in repr(sink)
    assert "CYAN" in repr(sink)
