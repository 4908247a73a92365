"""Substitution of an optimized staging file for its original.

The staging file has a different name from the original (ffmpeg must not
overwrite the input it is reading), so the swap is two steps: remove the
original, then rename the staging file into its place. Between the steps
only the staging file holds the content. A failure there is reported as
RENAME_FAILED and must never be treated as success.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)


class ReplaceStatus(Enum):
    """Which step of the replacement finished last."""

    REPLACED = "replaced"
    ORIGINAL_REMOVAL_FAILED = "original_removal_failed"
    RENAME_FAILED = "rename_failed"


@dataclass(frozen=True)
class ReplacementOutcome:
    """Result of replace_original()."""

    status: ReplaceStatus
    error: OSError | None = None

    @property
    def replaced(self) -> bool:
        return self.status is ReplaceStatus.REPLACED


def replace_original(source_path: Path, staging_path: Path) -> ReplacementOutcome:
    """Replace source_path with staging_path.

    Args:
        source_path: Original file; removed first.
        staging_path: Optimized output; renamed to source_path.

    Returns:
        REPLACED on success. ORIGINAL_REMOVAL_FAILED if the original could
        not be removed (both files are still present). RENAME_FAILED if the
        original was removed but the rename failed (the content now exists
        only at staging_path).
    """
    try:
        source_path.unlink()
    except OSError as e:
        logger.error(
            "Error removing file %s: %s",
            source_path,
            e,
            extra={"staging_path": str(staging_path)},
        )
        return ReplacementOutcome(ReplaceStatus.ORIGINAL_REMOVAL_FAILED, e)

    logger.debug("Source file removed: %s", source_path)

    try:
        staging_path.rename(source_path)
    except OSError as e:
        logger.critical(
            "Error renaming file %s to %s: %s",
            staging_path,
            source_path,
            e,
        )
        return ReplacementOutcome(ReplaceStatus.RENAME_FAILED, e)

    logger.debug("Optimized file renamed into place: %s", source_path)
    return ReplacementOutcome(ReplaceStatus.REPLACED)
