"""Execution layer for faststart.

- interface: Transcoder protocol, request/outcome types, tool lookup
- ffmpeg_faststart: ffmpeg-backed Transcoder
- replace: two-step replacement of the original by the staging file
- optimize: single-file optimization combining the two
"""

from faststart.executor.ffmpeg_faststart import FFmpegFaststartTranscoder
from faststart.executor.interface import (
    STAGING_MARKER,
    Transcoder,
    TranscodeOutcome,
    TranscodeRequest,
    get_tool_path,
    is_staging_path,
    staging_path_for,
)
from faststart.executor.optimize import (
    OptimizeErrorType,
    OptimizeResult,
    optimize_file,
)
from faststart.executor.replace import (
    ReplacementOutcome,
    ReplaceStatus,
    replace_original,
)

__all__ = [
    # Interface
    "STAGING_MARKER",
    "Transcoder",
    "TranscodeOutcome",
    "TranscodeRequest",
    "get_tool_path",
    "is_staging_path",
    "staging_path_for",
    # Transcoders
    "FFmpegFaststartTranscoder",
    # Replacement
    "ReplaceStatus",
    "ReplacementOutcome",
    "replace_original",
    # Optimizer
    "OptimizeErrorType",
    "OptimizeResult",
    "optimize_file",
]
