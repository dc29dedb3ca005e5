# topmark:header:start
#
#   project      : ColorFormat
#   file         : __init__.py
#   file_relpath : src/colorformat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat package.

ColorFormat renders text containing inline color directives (``%0``, ``&{12}``,
``~literal~``) to a color-capable sink. It exposes a small typed API and a
``colorformat`` command line tool.
"""

from __future__ import annotations

from colorformat.api import validate, write, write_line
from colorformat.scanner import FormatError, FormatErrorKind, ScanResult, Signs, scan
from colorformat.sink import AnsiSink, RecordingSink, TermColor, TerminalColors

__all__ = [
    "AnsiSink",
    "FormatError",
    "FormatErrorKind",
    "RecordingSink",
    "ScanResult",
    "Signs",
    "TermColor",
    "TerminalColors",
    "scan",
    "validate",
    "write",
    "write_line",
]
