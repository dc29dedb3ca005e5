# topmark:header:start
#
#   project      : ColorFormat
#   file         : constants.py
#   file_relpath : src/colorformat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

COLORFORMAT_VERSION: str = get_version("colorformat")

CONFIG_FILE_NAME: str = "colorformat.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
