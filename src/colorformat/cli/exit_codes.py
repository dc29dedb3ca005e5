# topmark:header:start
#
#   project      : ColorFormat
#   file         : exit_codes.py
#   file_relpath : src/colorformat/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ColorFormat CLI.

ColorFormat aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently. Click's own usage errors (unknown option,
missing argument) keep Click's default exit code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ColorFormat CLI.

    Attributes:
        SUCCESS: The text was rendered (or validated) completely.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid combination of flags/arguments. Mirrors BSD
            ``EX_USAGE (64)``.
        FORMAT_ERROR: The format string contains an invalid directive or
            references a missing color argument. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Configuration is unreadable, malformed or invalid. Mirrors
            BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
