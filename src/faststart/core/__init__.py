"""Core utilities package.

Pure helpers used across the codebase: display formatting and external
process invocation.
"""

from faststart.core.formatting import format_file_size, format_position
from faststart.core.subprocess_utils import CommandResult, run_command

__all__ = [
    "CommandResult",
    "format_file_size",
    "format_position",
    "run_command",
]
