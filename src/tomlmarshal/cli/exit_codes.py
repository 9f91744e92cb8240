# topmark:header:start
#
#   project      : TomlMarshal
#   file         : exit_codes.py
#   file_relpath : src/tomlmarshal/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TomlMarshal CLI.

The CLI follows the BSD `sysexits` convention so that scripts can tell a malformed
document apart from a missing or unreadable one.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TomlMarshal CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        PARSE_ERROR: The input is not valid TOML. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Any other error reading the input. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    PARSE_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
