# topmark:header:start
#
#   project      : ColorFormat
#   file         : version.py
#   file_relpath : src/colorformat/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat `version` command.

Prints the ColorFormat version installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from colorformat.cli.cli_types import EnumChoiceParam
from colorformat.cli.cmd_common import get_console, get_effective_verbosity
from colorformat.cli.options import OutputFormat
from colorformat.constants import COLORFORMAT_VERSION


@click.command(
    name="version",
    help="Show the current version of ColorFormat.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None) -> None:
    """Show the current version of ColorFormat.

    Args:
        ctx (click.Context): Click context holding the console.
        output_format (OutputFormat | None): Optional output format.
    """
    console = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": COLORFORMAT_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ColorFormat version:", bold=True, underline=True))
        console.print(f"    {console.styled(COLORFORMAT_VERSION, bold=True)}")
    else:
        console.print(console.styled(COLORFORMAT_VERSION, bold=True))
