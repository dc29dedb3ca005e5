# topmark:header:start
#
#   project      : ColorFormat
#   file         : __init__.py
#   file_relpath : src/colorformat/scanner/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive scanner and its small collaborators (resolver, controller, signs)."""

from __future__ import annotations

from colorformat.scanner.controller import apply_color
from colorformat.scanner.engine import DirectiveScanner, scan
from colorformat.scanner.resolver import resolve_argument
from colorformat.scanner.signs import DEFAULT_SIGNS, SignConfigError, Signs
from colorformat.scanner.types import (
    ColorSlot,
    Directive,
    FormatError,
    FormatErrorException,
    FormatErrorKind,
    ScanResult,
)

__all__ = [
    "DEFAULT_SIGNS",
    "ColorSlot",
    "Directive",
    "DirectiveScanner",
    "FormatError",
    "FormatErrorException",
    "FormatErrorKind",
    "ScanResult",
    "SignConfigError",
    "Signs",
    "apply_color",
    "resolve_argument",
    "scan",
]
