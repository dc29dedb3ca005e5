# topmark:header:start
#
#   project      : ColorFormat
#   file         : cmd_common.py
#   file_relpath : src/colorformat/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Plumbing shared by several commands: fetching the console and effective
configuration from the Click context, and reading the format string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import click

from colorformat.cli.errors import ColorformatConfigError, ColorformatFileNotFoundError
from colorformat.config.loaders import load_config
from colorformat.config.logging import get_logger
from colorformat.config.model import ConfigError
from colorformat.scanner.signs import SignConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from colorformat.cli.console import ClickConsole
    from colorformat.config.logging import ColorformatLogger
    from colorformat.config.model import Config

logger: ColorformatLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context by the root group."""
    return cast("ClickConsole", ctx.obj["console"])


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 = normal, <0 quiet, >0 verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> Config:
    """Load (once per invocation) and return the effective configuration.

    Raises:
        ColorformatFileNotFoundError: If ``--config`` names a missing file.
        ColorformatConfigError: If a configuration source is invalid.
    """
    cached: Config | None = ctx.obj.get("config")
    if cached is not None:
        return cached

    config_file: Path | None = ctx.obj.get("config_file")
    if config_file is not None and not config_file.exists():
        raise ColorformatFileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        config: Config = load_config(
            config_file=config_file,
            discover=not ctx.obj.get("no_config", False),
        )
    except (ConfigError, SignConfigError) as exc:
        raise ColorformatConfigError(str(exc)) from exc

    ctx.obj["config"] = config
    return config


def read_format_text(text: str) -> str:
    """Return the format string, reading stdin when `text` is ``-``.

    One trailing newline of stdin input is dropped; the command decides whether
    to write its own.
    """
    if text != STDIN_MARKER:
        return text
    data: str = click.get_text_stream("stdin").read()
    logger.debug("Read %d characters from stdin", len(data))
    return data[:-1] if data.endswith("\n") else data
