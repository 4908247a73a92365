"""Target classification and candidate discovery.

A target is either a single file or a directory tree. For directories all
matching files are collected before processing begins, so the run knows
its total up front.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from enum import Enum
from pathlib import Path

from faststart.exceptions import DirectoryEnumerationError
from faststart.executor.interface import is_staging_path

logger = logging.getLogger(__name__)


class TargetKind(Enum):
    """What a target path refers to."""

    MISSING = "missing"
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


def classify_target(path: Path) -> TargetKind:
    """Classify a target path. Symlinks are followed.

    A path that cannot be inspected at all (name too long, unreadable
    parent directory) is reported as MISSING.
    """
    try:
        st = path.stat()
    except OSError as e:
        if e.errno != errno.ENOENT:
            logger.warning("Cannot access %s: %s", path, e)
        return TargetKind.MISSING
    if stat.S_ISREG(st.st_mode):
        return TargetKind.FILE
    if stat.S_ISDIR(st.st_mode):
        return TargetKind.DIRECTORY
    return TargetKind.OTHER


def matches_extension(
    path: Path, extensions: list[str], case_sensitive: bool = True
) -> bool:
    """Check whether a path has one of the given extensions.

    Args:
        path: Path to check.
        extensions: Extensions without the leading dot (e.g. ["mp4"]).
        case_sensitive: If False, "MOVIE.MP4" matches "mp4".
    """
    suffix = path.suffix[1:]
    if not suffix:
        return False
    if case_sensitive:
        return suffix in extensions
    return suffix.casefold() in {ext.casefold() for ext in extensions}


def _raise_walk_error(error: OSError) -> None:
    raise error


def discover_candidates(
    root: Path, extensions: list[str], case_sensitive: bool = True
) -> list[Path]:
    """Recursively collect files under root with a matching extension.

    Directories and files are visited in sorted order. Symlinked
    directories are not followed. Files named like staging output
    (`*.new.<ext>`) are skipped with a warning, even when the user named
    them that way.

    Args:
        root: Directory to walk.
        extensions: Extensions without the leading dot.
        case_sensitive: Extension comparison mode.

    Returns:
        Candidate paths in traversal order.

    Raises:
        DirectoryEnumerationError: If any directory cannot be read.
    """
    candidates: list[Path] = []
    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if not matches_extension(path, extensions, case_sensitive):
                    continue
                if not path.is_file():
                    continue
                if is_staging_path(path):
                    logger.warning(
                        "Skipping %s: looks like a staging artifact from an "
                        "earlier run; rename or remove it manually",
                        path,
                    )
                    continue
                candidates.append(path)
    except OSError as e:
        raise DirectoryEnumerationError(root, e) from e

    logger.debug(
        "Discovered %d candidate(s) under %s",
        len(candidates),
        root,
        extra={"extensions": extensions, "case_sensitive": case_sensitive},
    )
    return candidates
