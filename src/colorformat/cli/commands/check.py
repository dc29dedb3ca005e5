# topmark:header:start
#
#   project      : ColorFormat
#   file         : check.py
#   file_relpath : src/colorformat/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat `check` command.

Validates a format string against its color arguments without rendering it.
Exits with ``FORMAT_ERROR`` when a render would fail.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from colorformat.api import validate
from colorformat.cli.cli_types import ColorParam, EnumChoiceParam
from colorformat.cli.cmd_common import (
    get_config,
    get_console,
    get_effective_verbosity,
    read_format_text,
)
from colorformat.cli.errors import ColorformatFormatError
from colorformat.cli.options import OutputFormat

if TYPE_CHECKING:
    from colorformat.scanner.types import ScanResult
    from colorformat.sink.colors import TermColor


def _result_payload(result: ScanResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "ok": result.ok,
        "written": result.written,
        "directives": result.directives,
    }
    if result.error is not None:
        payload["error"] = {
            "kind": result.error.kind.value,
            "position": result.error.position,
            "index": result.error.index,
            "message": result.error.message,
        }
    return payload


@click.command(
    name="check",
    help="Validate TEXT and its COLORS without rendering. Use '-' to read TEXT from stdin.",
)
@click.argument("text")
@click.argument("colors", nargs=-1, type=ColorParam())
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    text: str,
    colors: tuple[TermColor, ...],
    output_format: OutputFormat | None,
) -> None:
    """Validate TEXT.

    Args:
        ctx (click.Context): Click context holding the console and options.
        text (str): Format string, or ``-`` for stdin.
        colors (tuple[TermColor, ...]): Color arguments, in directive index order.
        output_format (OutputFormat | None): Report format; text by default.

    Raises:
        ColorformatFormatError: If the format string would fail to render.
    """
    config = get_config(ctx)
    console = get_console(ctx)
    result: ScanResult = validate(read_format_text(text), colors, signs=config.signs)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(_result_payload(result)))
        if result.error is not None:
            ctx.exit(ColorformatFormatError.exit_code)
        return

    if result.error is not None:
        raise ColorformatFormatError(result.error)

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel < 0:
        return
    console.print(console.styled("ok", fg="green", bold=True))
    if vlevel > 0:
        console.print(f"  characters: {result.written}")
        console.print(f"  directives: {result.directives}")
