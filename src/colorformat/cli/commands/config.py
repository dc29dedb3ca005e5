# topmark:header:start
#
#   project      : ColorFormat
#   file         : config.py
#   file_relpath : src/colorformat/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat `config` command.

Prints the effective configuration as TOML. With ``-v`` the merged sources are
listed first as TOML comments, so the output stays a valid document.
"""

from __future__ import annotations

import click

from colorformat.cli.cmd_common import get_config, get_console, get_effective_verbosity
from colorformat.config.loaders import to_toml


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Print the effective configuration."""
    config = get_config(ctx)
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        for source in config.sources:
            console.print(f"# source: {source}")
        console.print()
    console.print(to_toml(config), nl=False)
