"""Structural errors raised while resolving an optimization target.

These abort a run. Per-file failures are not exceptions: they are reported
through OptimizeResult so a directory run can continue past them.
"""

from pathlib import Path


class FaststartError(Exception):
    """Base class for faststart errors."""

    pass


class TargetNotFoundError(FaststartError):
    """Target path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target path not found: {path}")


class UnsupportedFileKindError(FaststartError):
    """Single-file target does not have a supported extension."""

    def __init__(self, path: Path, extensions: list[str]) -> None:
        self.path = path
        self.extensions = extensions
        supported = ", ".join(ext.upper() for ext in extensions)
        super().__init__(f"Only {supported} files are supported: {path}")


class NotFileOrDirectoryError(FaststartError):
    """Target exists but is neither a regular file nor a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Target path is not a file or directory: {path}")


class DirectoryEnumerationError(FaststartError):
    """Recursive directory walk failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading directory {path}: {cause}")


class ConfigError(FaststartError):
    """Configuration could not be loaded or is invalid."""

    pass
