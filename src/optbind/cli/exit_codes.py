# topmark:header:start
#
#   project      : OptBind
#   file         : exit_codes.py
#   file_relpath : src/optbind/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the OptBind CLI.

OptBind aligns with the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the OptBind CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args, or a strict
            parse failure). Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (missing/invalid config). Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
