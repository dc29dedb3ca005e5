# topmark:header:start
#
#   project      : ColorFormat
#   file         : __init__.py
#   file_relpath : src/colorformat/sink/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks: the protocol the scanner writes to and its implementations."""

from __future__ import annotations

from colorformat.sink.ansi import AnsiSink
from colorformat.sink.api import OutputSink
from colorformat.sink.colors import TermColor
from colorformat.sink.defaults import TerminalColors
from colorformat.sink.recording import RecordingSink, SinkEvent

__all__ = [
    "AnsiSink",
    "OutputSink",
    "RecordingSink",
    "SinkEvent",
    "TermColor",
    "TerminalColors",
]
