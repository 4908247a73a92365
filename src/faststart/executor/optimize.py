"""Single-file optimization: transcode, then replace the original.

optimize_file() is the unit of failure isolation. Every failure it can
produce concerns one file only and is returned as an OptimizeResult, never
raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from faststart.core.formatting import format_file_size
from faststart.executor.interface import Transcoder, TranscodeRequest
from faststart.executor.replace import ReplaceStatus, replace_original

logger = logging.getLogger(__name__)


class OptimizeErrorType(Enum):
    """Categorization of per-file optimization failures."""

    NOT_FOUND = "not_found"
    TRANSCODE_FAILED = "transcode_failed"
    ORIGINAL_REMOVAL_FAILED = "original_removal_failed"
    RENAME_FAILED = "rename_failed"


@dataclass(frozen=True)
class OptimizeResult:
    """Result of optimizing one file."""

    source_path: Path
    success: bool
    error_type: OptimizeErrorType | None = None
    message: str = ""
    cause: OSError | None = None
    staging_path: Path | None = None

    @property
    def is_severe(self) -> bool:
        """True when the original is gone and the replacement is not in place."""
        return self.error_type is OptimizeErrorType.RENAME_FAILED

    def describe(self) -> str:
        """Human-readable one-line description of the outcome."""
        if self.success:
            return f"File optimized successfully: {self.source_path}"
        if self.is_severe:
            return (
                f"DATA AT RISK: original {self.source_path} was removed but the "
                f"optimized file could not be renamed into place ({self.message}). "
                f"Optimized content remains at {self.staging_path}; "
                "rename it manually"
            )
        return f"Error optimizing file {self.source_path}: {self.message}"


def _failure(
    source_path: Path,
    error_type: OptimizeErrorType,
    message: str,
    cause: OSError | None = None,
    staging_path: Path | None = None,
) -> OptimizeResult:
    return OptimizeResult(
        source_path=source_path,
        success=False,
        error_type=error_type,
        message=message,
        cause=cause,
        staging_path=staging_path,
    )


def _discard_partial_output(staging_path: Path) -> None:
    """Remove whatever a failed transcode left at staging_path."""
    try:
        staging_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not remove partial output %s: %s", staging_path, e)


def optimize_file(source_path: Path, transcoder: Transcoder) -> OptimizeResult:
    """Optimize one file for fast-start playback and swap it into place.

    Args:
        source_path: File to optimize. Checked for existence at call time,
            since a directory snapshot may be stale.
        transcoder: External re-multiplexer.

    Returns:
        OptimizeResult. The source is untouched unless the transcoder
        succeeded.
    """
    if not source_path.exists():
        return _failure(
            source_path, OptimizeErrorType.NOT_FOUND, "Source file does not exist"
        )

    logger.info("Try optimize file: %s", source_path)

    request = TranscodeRequest.for_source(source_path)
    outcome = transcoder.invoke(request)

    if not outcome.success:
        logger.error("Command failed with error:\n%s", outcome.diagnostic)
        _discard_partial_output(outcome.staging_path)
        return _failure(
            source_path,
            OptimizeErrorType.TRANSCODE_FAILED,
            f"ffmpeg failed with error: {outcome.diagnostic}",
        )

    try:
        original_size = source_path.stat().st_size
        optimized_size = outcome.staging_path.stat().st_size
    except OSError:
        pass  # Sizes are informational only
    else:
        logger.debug(
            "Optimized output ready: %s -> %s",
            format_file_size(original_size),
            format_file_size(optimized_size),
        )

    replacement = replace_original(source_path, outcome.staging_path)

    if replacement.status is ReplaceStatus.ORIGINAL_REMOVAL_FAILED:
        return _failure(
            source_path,
            OptimizeErrorType.ORIGINAL_REMOVAL_FAILED,
            f"Could not remove original: {replacement.error}",
            cause=replacement.error,
            staging_path=outcome.staging_path,
        )
    if replacement.status is ReplaceStatus.RENAME_FAILED:
        return _failure(
            source_path,
            OptimizeErrorType.RENAME_FAILED,
            f"Could not rename {outcome.staging_path}: {replacement.error}",
            cause=replacement.error,
            staging_path=outcome.staging_path,
        )

    return OptimizeResult(source_path=source_path, success=True)
