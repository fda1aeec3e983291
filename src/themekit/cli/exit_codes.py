# topmark:header:start
#
#   project      : ThemeKit
#   file         : exit_codes.py
#   file_relpath : src/themekit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ThemeKit CLI.

Values follow the BSD `sysexits` convention where practical so other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ThemeKit CLI.

    Attributes:
        SUCCESS: Successful execution (including "nothing found" for term lookups).
        FAILURE: Generic failure.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed input data (term data, strict-mode icon sources).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Requested icon or input file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
