# topmark:header:start
#
#   project      : ColorFormat
#   file         : render.py
#   file_relpath : src/colorformat/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat `render` command.

Renders a format string to stdout, substituting the given colors:

    colorformat render "%0error:%1 disk full" red white
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from colorformat.api import write, write_line
from colorformat.cli.cli_types import ColorParam
from colorformat.cli.cmd_common import get_config, get_console, read_format_text
from colorformat.cli.errors import ColorformatFormatError
from colorformat.sink.defaults import TerminalColors

if TYPE_CHECKING:
    from colorformat.scanner.types import ScanResult
    from colorformat.sink.ansi import AnsiSink
    from colorformat.sink.colors import TermColor


@click.command(
    name="render",
    help="Render TEXT with inline color directives. Use '-' to read TEXT from stdin.",
)
@click.argument("text")
@click.argument("colors", nargs=-1, type=ColorParam())
@click.option(
    "-n",
    "--no-newline",
    is_flag=True,
    default=False,
    help="Do not write a trailing newline.",
)
@click.option(
    "--keep-colors",
    is_flag=True,
    default=False,
    help="Leave the last applied colors active instead of restoring the defaults.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    text: str,
    colors: tuple[TermColor, ...],
    no_newline: bool,
    keep_colors: bool,
) -> None:
    """Render TEXT to stdout.

    Args:
        ctx (click.Context): Click context holding the console and options.
        text (str): Format string, or ``-`` for stdin.
        colors (tuple[TermColor, ...]): Color arguments, in directive index order.
        no_newline (bool): Suppress the trailing newline.
        keep_colors (bool): Skip restoring the default colors.

    Raises:
        ColorformatFormatError: If the format string cannot be rendered; output
            written before the failure stays on stdout, followed by a newline.
    """
    config = get_config(ctx)
    sink: AnsiSink = get_console(ctx).sink()
    defaults: TerminalColors = TerminalColors.capture(sink)

    render = write if no_newline or not config.newline else write_line
    result: ScanResult = render(
        read_format_text(text),
        colors,
        sink=sink,
        defaults=defaults,
        restore=config.restore_defaults and not keep_colors,
        signs=config.signs,
    )
    if result.error is not None:
        if result.written:
            # partial output ends its line before the error
            sink.write_char("\n")
        raise ColorformatFormatError(result.error)
