# topmark:header:start
#
#   project      : TypeSniff
#   file         : exit_codes.py
#   file_relpath : src/typesniff/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the TypeSniff CLI.

Usage:
    ```python
    import subprocess
    from typesniff.cli.exit_codes import ExitCode

    result = subprocess.run(["typesniff", "detect", "data/"])
    if result.returncode == ExitCode.NOT_DETECTED:
        print("Unknown resource type.")
    ```
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TypeSniff CLI.

    Attributes:
        SUCCESS (int): A test object type was detected (or the command succeeded).
        NOT_DETECTED (int): Detection ran but no test object type matched.
        USAGE_ERROR (int): Invalid arguments or options (Click's usage error code).
    """

    SUCCESS = 0
    NOT_DETECTED = 1
    USAGE_ERROR = 2
