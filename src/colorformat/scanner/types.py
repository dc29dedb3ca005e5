# topmark:header:start
#
#   project      : ColorFormat
#   file         : types.py
#   file_relpath : src/colorformat/scanner/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types produced and consumed by the directive scanner.

This module is presentation-free: it holds the transient `Directive` value,
the `FormatError` value describing why a scan stopped, and the `ScanResult`
returned by every scan.

Scanner failures are *values*, not exceptions. Callers that prefer exceptions
can call `ScanResult.raise_for_error()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorSlot(str, Enum):
    """Which color slot of the sink a directive targets."""

    FOREGROUND = "fg"
    BACKGROUND = "bg"

    @property
    def is_foreground(self) -> bool:
        """Return True for the foreground slot."""
        return self is ColorSlot.FOREGROUND


@dataclass(frozen=True)
class Directive:
    """A recognized color change: a slot plus a color-argument index."""

    slot: ColorSlot
    index: int


class FormatErrorKind(str, Enum):
    """Reasons a scan can abort.

    Attributes:
        ARGUMENT_INDEX_OUT_OF_RANGE: A directive references an index that is not
            present in the color-argument list.
        INVALID_ARGUMENT_FORMAT: The text between the brackets of a bracketed
            directive is not a non-negative decimal integer.
        UNTERMINATED_BRACKET: A bracketed directive has no closing bracket before
            the end of the string.
    """

    ARGUMENT_INDEX_OUT_OF_RANGE = "argument-index-out-of-range"
    INVALID_ARGUMENT_FORMAT = "invalid-argument-format"
    UNTERMINATED_BRACKET = "unterminated-bracket"


@dataclass(frozen=True)
class FormatError:
    """A scanner failure.

    Attributes:
        kind (FormatErrorKind): The failure category.
        position (int): Offset of the directive sign that caused the failure.
        index (int | None): The offending color-argument index, when one was parsed.
            Indices too long to convert are left as None and reported in `detail`.
        detail (str): Extra context (the rejected bracket contents, for instance),
            shortened when very long.
    """

    kind: FormatErrorKind
    position: int
    index: int | None = None
    detail: str = ""

    @property
    def message(self) -> str:
        """Return a human-readable description of the failure."""
        if self.kind is FormatErrorKind.ARGUMENT_INDEX_OUT_OF_RANGE:
            label: object = self.index if self.index is not None else self.detail
            return (
                f"color argument #{label} referenced at position {self.position} "
                "was not supplied"
            )
        if self.kind is FormatErrorKind.INVALID_ARGUMENT_FORMAT:
            return (
                f"color argument {self.detail!r} at position {self.position} "
                "is not a non-negative integer"
            )
        return f"closing bracket missing for directive at position {self.position}"

    def __str__(self) -> str:
        return self.message


class FormatErrorException(Exception):
    """Exception carrying a `FormatError`, raised by `ScanResult.raise_for_error()`."""

    def __init__(self, error: FormatError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a single scan.

    Attributes:
        error (FormatError | None): The failure that aborted the scan, if any.
        written (int): Number of literal characters written to the sink.
        directives (int): Number of color changes applied to the sink.
    """

    error: FormatError | None = None
    written: int = 0
    directives: int = 0

    @property
    def ok(self) -> bool:
        """Return True when the scan ran to completion."""
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise `FormatErrorException` if the scan failed.

        Raises:
            FormatErrorException: When `error` is set.
        """
        if self.error is not None:
            raise FormatErrorException(self.error)
