# topmark:header:start
#
#   project      : ColorFormat
#   file         : model.py
#   file_relpath : src/colorformat/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: a mutable builder and its frozen snapshot.

Layers are merged in order into a `MutableConfig` (defaults, then
``[tool.colorformat]`` from ``pyproject.toml``, then ``colorformat.toml``, then
an explicit ``--config`` file), and the result is frozen into a `Config`
consumed by the API and the CLI.

Do not mutate a frozen `Config`; call `Config.thaw()`, edit, then `freeze()`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from colorformat.config.keys import Toml
from colorformat.config.logging import get_logger
from colorformat.scanner.signs import DEFAULT_SIGNS, Signs

if TYPE_CHECKING:
    from collections.abc import Mapping

    from colorformat.config.logging import ColorformatLogger

logger: ColorformatLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised for unreadable, malformed or invalid configuration sources."""


@dataclass(frozen=True)
class Config:
    """Effective, immutable configuration.

    Attributes:
        signs (Signs): Sign characters used by the scanner.
        restore_defaults (bool): Restore the captured default colors after rendering.
        newline (bool): Terminate rendered output with a newline (CLI ``render``).
        sources (tuple[str, ...]): Human-readable list of merged sources, in order.
    """

    signs: Signs = DEFAULT_SIGNS
    restore_defaults: bool = True
    newline: bool = True
    sources: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            signs=self.signs.to_dict(),
            restore_defaults=self.restore_defaults,
            newline=self.newline,
            sources=list(self.sources),
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return the configuration as a TOML-compatible dict (sources omitted)."""
        return {
            Toml.KEY_RESTORE_DEFAULTS: self.restore_defaults,
            Toml.KEY_NEWLINE: self.newline,
            Toml.SECTION_SIGNS: self.signs.to_dict(),
        }


@dataclass
class MutableConfig:
    """Builder that merges configuration layers before freezing.

    Attributes:
        signs (dict[str, str]): Sign overrides collected so far.
        restore_defaults (bool): Current value of ``restore_defaults``.
        newline (bool): Current value of ``newline``.
        sources (list[str]): Sources merged so far.
    """

    signs: dict[str, str] = field(default_factory=lambda: DEFAULT_SIGNS.to_dict())
    restore_defaults: bool = True
    newline: bool = True
    sources: list[str] = field(default_factory=lambda: [])

    def merge_table(self, table: Mapping[str, Any], *, source: str) -> MutableConfig:
        """Overlay one TOML table onto this builder.

        Unknown keys are logged and ignored.

        Args:
            table (Mapping[str, Any]): Parsed table (``colorformat.toml`` root or
                ``[tool.colorformat]``).
            source (str): Label recorded in `sources`.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        for key in table:
            if key not in Toml.ROOT_KEYS:
                logger.warning("%s: ignoring unknown configuration key '%s'", source, key)

        for key in (Toml.KEY_RESTORE_DEFAULTS, Toml.KEY_NEWLINE):
            if key in table:
                value: Any = table[key]
                if not isinstance(value, bool):
                    raise ConfigError(f"{source}: '{key}' must be a boolean, got {value!r}")
                setattr(self, key, value)

        signs_table: Any = table.get(Toml.SECTION_SIGNS)
        if signs_table is not None:
            if not isinstance(signs_table, dict):
                raise ConfigError(f"{source}: '[{Toml.SECTION_SIGNS}]' must be a table")
            for key, value in signs_table.items():
                if key not in Toml.SIGN_KEYS:
                    logger.warning(
                        "%s: ignoring unknown key '%s.%s'", source, Toml.SECTION_SIGNS, key
                    )
                    continue
                if not isinstance(value, str):
                    raise ConfigError(
                        f"{source}: '{Toml.SECTION_SIGNS}.{key}' must be a string, got {value!r}"
                    )
                self.signs[key] = value

        self.sources.append(source)
        logger.debug("Merged configuration from %s", source)
        return self

    def freeze(self) -> Config:
        """Validate and return the immutable `Config`.

        Raises:
            SignConfigError: If the merged sign set is not usable.
        """
        return Config(
            signs=Signs.from_mapping(self.signs),
            restore_defaults=self.restore_defaults,
            newline=self.newline,
            sources=tuple(self.sources),
        )
