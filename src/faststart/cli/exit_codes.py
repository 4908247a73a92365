"""Centralized exit codes for the faststart CLI.

Exit codes:
    0: Success (single file optimized, or directory run completed)
    1: No target path argument
    2: Target path does not exist
    3: Target is neither a file nor a directory
    4: Single-file optimization failed
    5: Single file has an unsupported extension
    6: Directory enumeration failed
    7: Configuration error

Per-file failures during a directory run do not change the exit code.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the faststart command."""

    SUCCESS = 0
    NO_ARGUMENT = 1
    TARGET_NOT_FOUND = 2
    NOT_FILE_OR_DIRECTORY = 3
    OPTIMIZE_FAILED = 4
    UNSUPPORTED_FILE_KIND = 5
    ENUMERATION_FAILED = 6
    CONFIG_ERROR = 7
