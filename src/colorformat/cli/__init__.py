# topmark:header:start
#
#   project      : ColorFormat
#   file         : __init__.py
#   file_relpath : src/colorformat/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorFormat command line interface (Click)."""
