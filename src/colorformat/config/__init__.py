# topmark:header:start
#
#   project      : ColorFormat
#   file         : __init__.py
#   file_relpath : src/colorformat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model, TOML loaders and logging setup."""

from __future__ import annotations

from colorformat.config.model import Config, ConfigError, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
