# topmark:header:start
#
#   project      : ColorFormat
#   file         : loaders.py
#   file_relpath : src/colorformat/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load ColorFormat configuration from TOML sources.

Sources, later overriding earlier:

1. built-in defaults (no I/O);
2. ``[tool.colorformat]`` in ``<cwd>/pyproject.toml``;
3. ``<cwd>/colorformat.toml``;
4. an explicit file passed by the caller (``--config``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from colorformat.config.keys import Toml
from colorformat.config.logging import get_logger
from colorformat.config.model import ConfigError, MutableConfig
from colorformat.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from colorformat.config.logging import ColorformatLogger
    from colorformat.config.model import Config

logger: ColorformatLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        path (Path): The TOML document.

    Returns:
        dict[str, Any]: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("dict[str, Any]", data) if isinstance(data, dict) else {}


def load_pyproject_table(path: Path) -> dict[str, Any] | None:
    """Return the ``[tool.colorformat]`` table of a ``pyproject.toml``.

    Args:
        path (Path): Path to ``pyproject.toml``.

    Returns:
        dict[str, Any] | None: The table, or None when the section is absent.

    Raises:
        ConfigError: If the file is unreadable or the section is not a table.
    """
    data: dict[str, Any] = load_toml_dict(path)
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_PYPROJECT) if isinstance(tool, dict) else None
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(
            f"{path}: [{Toml.SECTION_TOOL}.{Toml.SECTION_PYPROJECT}] must be a table"
        )
    return cast("dict[str, Any]", section)


def build_config(
    *,
    cwd: Path | None = None,
    config_file: Path | None = None,
    discover: bool = True,
) -> MutableConfig:
    """Merge all configuration layers into a builder.

    Args:
        cwd (Path | None): Directory searched for ``pyproject.toml`` and
            ``colorformat.toml``. Defaults to the current working directory.
        config_file (Path | None): Explicit file merged last.
        discover (bool): If False, skip the files discovered in `cwd`.

    Returns:
        MutableConfig: The merged, not yet validated, configuration.

    Raises:
        ConfigError: If a source is unreadable or malformed.
    """
    draft = MutableConfig(sources=["defaults"])
    base: Path = cwd or Path.cwd()

    if discover:
        pyproject: Path = base / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            table: dict[str, Any] | None = load_pyproject_table(pyproject)
            if table is not None:
                draft.merge_table(table, source=str(pyproject))

        local: Path = base / CONFIG_FILE_NAME
        if local.is_file():
            draft.merge_table(load_toml_dict(local), source=str(local))

    if config_file is not None:
        if not config_file.is_file():
            raise ConfigError(f"Configuration file not found: {config_file}")
        draft.merge_table(load_toml_dict(config_file), source=str(config_file))

    return draft


def load_config(
    *,
    cwd: Path | None = None,
    config_file: Path | None = None,
    discover: bool = True,
) -> Config:
    """Return the frozen effective configuration.

    See `build_config` for the arguments.

    Raises:
        ConfigError: If a source is unreadable or malformed.
        SignConfigError: If the merged sign set is not usable.
    """
    config: Config = build_config(cwd=cwd, config_file=config_file, discover=discover).freeze()
    logger.debug("Effective configuration: %s", config)
    return config


def to_toml(config: Config) -> str:
    """Serialize a configuration as a TOML document.

    Args:
        config (Config): The configuration to render.

    Returns:
        str: TOML text suitable for ``colorformat.toml``.
    """
    return tomlkit.dumps(config.to_toml_dict())
