"""Scanner module for faststart.

Public API:
    - TargetKind: Classification of a target path
    - classify_target: Classify a path as file, directory, missing or other
    - matches_extension: Extension filter used for both modes
    - discover_candidates: Recursive candidate enumeration
"""

from faststart.scanner.discovery import (
    TargetKind,
    classify_target,
    discover_candidates,
    matches_extension,
)

__all__ = [
    "TargetKind",
    "classify_target",
    "discover_candidates",
    "matches_extension",
]
