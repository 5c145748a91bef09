# topmark:header:start
#
#   project      : ParamSync
#   file         : exit_codes.py
#   file_relpath : src/paramsync/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The ParamSync Authors
#
# topmark:header:end

"""Exit codes for the ParamSync CLI.

ParamSync aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ParamSync CLI.

    Attributes:
        SUCCESS: Successful execution, including manifests that carry no
            ParamSync annotations (they are skipped).
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The resolved data is inconsistent (key collision,
            unsupported parameter type) or a manifest is malformed. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNAVAILABLE: The parameter store could not serve a lookup. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNAVAILABLE = 69  # EX_UNAVAILABLE
    CONFIG_ERROR = 78  # EX_CONFIG
