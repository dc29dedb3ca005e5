# topmark:header:start
#
#   project      : ColorFormat
#   file         : resolver.py
#   file_relpath : src/colorformat/scanner/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-argument resolution: a pure bounds check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from colorformat.scanner.types import FormatError, FormatErrorKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from colorformat.sink.colors import TermColor


def resolve_argument(
    index: int,
    colors: Sequence[TermColor],
    *,
    position: int = 0,
) -> tuple[TermColor | None, FormatError | None]:
    """Return the color at `index`, or an out-of-range error.

    Args:
        index (int): Parsed directive index.
        colors (Sequence[TermColor]): Color arguments supplied with the format string.
        position (int): Offset of the directive in the format string, recorded on
            the error.

    Returns:
        tuple[TermColor | None, FormatError | None]: ``(color, None)`` on success,
        ``(None, error)`` when `index` is outside ``[0, len(colors))``.
    """
    if 0 <= index < len(colors):
        return colors[index], None
    return None, FormatError(
        kind=FormatErrorKind.ARGUMENT_INDEX_OUT_OF_RANGE,
        position=position,
        index=index,
    )
