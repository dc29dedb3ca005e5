# topmark:header:start
#
#   project      : ColorFormat
#   file         : colors.py
#   file_relpath : src/colorformat/cli/commands/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat `colors` command.

Lists the color names accepted as color arguments, each shown in its color.
"""

from __future__ import annotations

import click

from colorformat.cli.cmd_common import get_console
from colorformat.sink.colors import TermColor


@click.command(
    name="colors",
    help="List the color names accepted as COLORS arguments.",
)
@click.option(
    "--background",
    is_flag=True,
    default=False,
    help="Show each color as a background instead of a foreground.",
)
@click.pass_context
def colors_command(ctx: click.Context, *, background: bool) -> None:
    """Print one color name per line, styled in that color."""
    console = get_console(ctx)
    for color in TermColor:
        if background:
            console.print(console.styled(color.value, bg=color.value))
        else:
            console.print(console.styled(color.value, fg=color.value))
