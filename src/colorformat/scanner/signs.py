# topmark:header:start
#
#   project      : ColorFormat
#   file         : signs.py
#   file_relpath : src/colorformat/scanner/signs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sign characters recognized by the directive scanner.

The defaults are:

| Sign            | Char | Role                                        |
|-----------------|------|---------------------------------------------|
| `fore`          | `%`  | introduces a foreground directive           |
| `back`          | `&`  | introduces a background directive           |
| `stop`          | `~`  | delimits a literal segment                  |
| `open_bracket`  | `{`  | opens a multi-digit argument                |
| `close_bracket` | `}`  | closes a multi-digit argument               |

A `Signs` instance can be built from a configuration table via
`Signs.from_mapping()`; missing keys fall back to the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

FORE_SIGN: Final[str] = "%"
BACK_SIGN: Final[str] = "&"
STOP_SIGN: Final[str] = "~"
OPEN_BRACKET: Final[str] = "{"
CLOSE_BRACKET: Final[str] = "}"

ASCII_DIGITS: Final[str] = "0123456789"


class SignConfigError(ValueError):
    """Raised when a sign set is not usable by the scanner."""


@dataclass(frozen=True)
class Signs:
    """Immutable set of scanner sign characters.

    Raises:
        SignConfigError: If a sign is not exactly one character, is an ASCII
            digit, or collides with another sign.
    """

    fore: str = FORE_SIGN
    back: str = BACK_SIGN
    stop: str = STOP_SIGN
    open_bracket: str = OPEN_BRACKET
    close_bracket: str = CLOSE_BRACKET

    def __post_init__(self) -> None:
        seen: dict[str, str] = {}
        for f in fields(self):
            value: Any = getattr(self, f.name)
            if not isinstance(value, str) or len(value) != 1:
                raise SignConfigError(f"Sign '{f.name}' must be a single character, got {value!r}")
            if value in ASCII_DIGITS:
                raise SignConfigError(f"Sign '{f.name}' must not be a digit, got {value!r}")
            if value in seen:
                raise SignConfigError(
                    f"Signs '{seen[value]}' and '{f.name}' share the same character {value!r}"
                )
            seen[value] = f.name

    @property
    def directive_signs(self) -> tuple[str, str]:
        """Return the foreground and background directive introducers."""
        return (self.fore, self.back)

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any] | None) -> Signs:
        """Build a sign set from a config table.

        Args:
            table (Mapping[str, Any] | None): Mapping with any of the keys `fore`,
                `back`, `stop`, `open_bracket`, `close_bracket`.

        Returns:
            Signs: The validated sign set.
        """
        if not table:
            return DEFAULT_SIGNS
        known: set[str] = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {k: v for k, v in table.items() if k in known}
        return cls(**kwargs)

    def to_dict(self) -> dict[str, str]:
        """Return the signs as a plain dict (config key -> character)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_SIGNS: Final[Signs] = Signs()
