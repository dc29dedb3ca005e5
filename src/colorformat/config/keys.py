# topmark:header:start
#
#   project      : ColorFormat
#   file         : keys.py
#   file_relpath : src/colorformat/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ColorFormat configuration.

Keys defined here are the external configuration API, as it appears in
``colorformat.toml`` and in ``[tool.colorformat]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ColorFormat configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_PYPROJECT: Final[str] = "colorformat"

    # top level
    KEY_RESTORE_DEFAULTS: Final[str] = "restore_defaults"
    KEY_NEWLINE: Final[str] = "newline"

    # [signs]
    SECTION_SIGNS: Final[str] = "signs"

    KEY_FORE: Final[str] = "fore"
    KEY_BACK: Final[str] = "back"
    KEY_STOP: Final[str] = "stop"
    KEY_OPEN_BRACKET: Final[str] = "open_bracket"
    KEY_CLOSE_BRACKET: Final[str] = "close_bracket"

    ROOT_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_RESTORE_DEFAULTS, KEY_NEWLINE, SECTION_SIGNS}
    )
    SIGN_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_FORE, KEY_BACK, KEY_STOP, KEY_OPEN_BRACKET, KEY_CLOSE_BRACKET}
    )
