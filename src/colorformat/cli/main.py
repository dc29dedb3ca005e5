# topmark:header:start
#
#   project      : ColorFormat
#   file         : main.py
#   file_relpath : src/colorformat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat command line interface.

Group-level options (verbosity, color, configuration) are resolved once and
placed into ``ctx.obj``; subcommands read them back through
`colorformat.cli.cmd_common`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from colorformat.cli.commands.check import check_command
from colorformat.cli.commands.colors import colors_command
from colorformat.cli.commands.config import config_command
from colorformat.cli.commands.render import render_command
from colorformat.cli.commands.version import version_command
from colorformat.cli.console import ClickConsole
from colorformat.cli.errors import ColorformatUnexpectedError
from colorformat.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from colorformat.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class ColorformatGroup(click.Group):
    """Click group that maps uncaught exceptions to `ExitCode.UNEXPECTED_ERROR`."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as exc:
            logger.debug("Unhandled exception in command", exc_info=True)
            raise ColorformatUnexpectedError(f"Unexpected error: {exc}") from exc


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, config) on the context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit ``--color`` value.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (Path | None): Extra configuration file.
        no_config (bool): Skip configuration discovery in the working directory.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["config_file"] = config_file
    ctx.obj["no_config"] = no_config
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=ColorformatGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render text with inline color directives.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Entry point for the ColorFormat CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
        no_config=no_config,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'colorformat render TEXT [COLORS...]' to render text.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)
cli.add_command(check_command)
cli.add_command(colors_command)
cli.add_command(config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
