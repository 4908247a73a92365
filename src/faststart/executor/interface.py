"""Transcoder protocol, request/outcome types and tool lookup.

The Transcoder protocol is the seam between the optimizer and the external
re-multiplexer, so tests can substitute a fake for ffmpeg.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

# Inserted between stem and extension: movie.mp4 -> movie.new.mp4
STAGING_MARKER = ".new"


def staging_path_for(source_path: Path) -> Path:
    """Derive the staging output path for a source file.

    The staging file shares the source's directory, stem and extension,
    with STAGING_MARKER inserted before the extension.
    """
    return source_path.with_name(
        f"{source_path.stem}{STAGING_MARKER}{source_path.suffix}"
    )


def is_staging_path(path: Path) -> bool:
    """Check whether a path looks like a staging artifact."""
    return path.stem.endswith(STAGING_MARKER)


@dataclass(frozen=True)
class TranscodeRequest:
    """Source file and the staging path the transcoder writes to."""

    source_path: Path
    staging_path: Path

    @classmethod
    def for_source(cls, source_path: Path) -> TranscodeRequest:
        return cls(source_path=source_path, staging_path=staging_path_for(source_path))


@dataclass(frozen=True)
class TranscodeOutcome:
    """Result of one external transcoder invocation.

    Success is decided only by the transcoder's own exit status. On failure
    the diagnostic holds the tool's error output verbatim.
    """

    success: bool
    """True if the external process reported success."""

    staging_path: Path
    """Where the output was (or would have been) written."""

    diagnostic: str = ""
    """Error stream text of a failed invocation."""

    returncode: int | None = None
    """Process exit status, None if the process never started."""

    @classmethod
    def succeeded(cls, staging_path: Path) -> TranscodeOutcome:
        return cls(success=True, staging_path=staging_path, returncode=0)

    @classmethod
    def failed(
        cls, staging_path: Path, diagnostic: str, returncode: int | None = None
    ) -> TranscodeOutcome:
        return cls(
            success=False,
            staging_path=staging_path,
            diagnostic=diagnostic,
            returncode=returncode,
        )


class Transcoder(Protocol):
    """Protocol for external re-multiplexing adapters.

    A transcoder reads request.source_path, writes request.staging_path
    (overwriting any stale file there) and never modifies the source.
    """

    def invoke(self, request: TranscodeRequest) -> TranscodeOutcome:
        """Run the external re-multiplex for one file.

        Args:
            request: Source and staging paths.

        Returns:
            TranscodeOutcome describing success or the tool's diagnostic.
        """
        ...


def get_tool_path(tool_name: str, configured: Path | None = None) -> Path | None:
    """Resolve an external tool, or None if not available.

    Args:
        tool_name: Executable name to look up in PATH.
        configured: Explicitly configured path; used as-is when set.

    Returns:
        Path to the tool executable, or None.
    """
    if configured is not None:
        return configured
    found = shutil.which(tool_name)
    return Path(found) if found else None
