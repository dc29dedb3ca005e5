# topmark:header:start
#
#   project      : ColorFormat
#   file         : colors.py
#   file_relpath : src/colorformat/sink/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal color palette used as color arguments.

`TermColor` is a `str, Enum` whose values are the color names understood by
`click.style` (``"red"``, ``"bright_blue"``...). Keeping the enum value a plain
string preserves Enum semantics (hashing, equality, `repr`) and lets the CLI
parse color arguments case-insensitively by value.

Example:
    ```python
    from colorformat.sink.colors import TermColor

    TermColor.RED.value         # 'red'
    TermColor.RED.styled("hi")  # red "hi" (ANSI)
    ```
"""

from __future__ import annotations

from enum import Enum

import click


class TermColor(str, Enum):
    """The 16 standard terminal colors."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"

    def styled(self, text: str, *, background: bool = False) -> str:
        """Return `text` wrapped in this color's ANSI sequence.

        Args:
            text (str): Text to decorate.
            background (bool): Apply the color to the background instead of the
                foreground.

        Returns:
            str: The decorated text, reset at the end.
        """
        if background:
            return click.style(text, bg=self.value)
        return click.style(text, fg=self.value)
