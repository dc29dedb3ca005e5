# topmark:header:start
#
#   project      : ColorFormat
#   file         : __main__.py
#   file_relpath : src/colorformat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ColorFormat via ``python -m colorformat``.

Delegates to :func:`colorformat.cli.main.cli`, the same Click group installed as
the ``colorformat`` console script.

Examples:
    Render a line in two colors::

        python -m colorformat render "%0Hi %1World" red blue
"""

from __future__ import annotations

from colorformat.cli.main import cli

if __name__ == "__main__":
    cli()
