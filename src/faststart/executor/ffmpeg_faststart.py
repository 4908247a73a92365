"""FFmpeg adapter that re-multiplexes MP4 files for fast-start playback.

Runs ffmpeg with stream copy (no re-encoding) and ``-movflags +faststart``,
which moves the moov index to the front of the file so playback can start
before the whole file has downloaded.
"""

from __future__ import annotations

import logging
from pathlib import Path

from faststart.core.subprocess_utils import run_command
from faststart.executor.interface import (
    TranscodeOutcome,
    TranscodeRequest,
    get_tool_path,
)

logger = logging.getLogger(__name__)


class FFmpegFaststartTranscoder:
    """Transcoder implementation backed by the ffmpeg executable.

    There is no timeout: the call blocks until ffmpeg exits.
    """

    TOOL_NAME = "ffmpeg"

    def __init__(self, ffmpeg_path: Path | None = None) -> None:
        """Initialize the transcoder.

        Args:
            ffmpeg_path: Explicit ffmpeg path. None looks ffmpeg up in PATH.
        """
        self._configured_path = ffmpeg_path
        self._tool_path: Path | None = None

    @property
    def tool_path(self) -> Path | None:
        """Path to ffmpeg, or None if it cannot be found."""
        if self._tool_path is None:
            self._tool_path = get_tool_path(self.TOOL_NAME, self._configured_path)
        return self._tool_path

    def build_command(self, tool_path: Path, request: TranscodeRequest) -> list[str]:
        """Build the ffmpeg command line for a request."""
        return [
            str(tool_path),
            "-hide_banner",
            "-i",
            str(request.source_path),
            "-c",
            "copy",
            "-movflags",
            "+faststart",
            "-y",
            str(request.staging_path),
        ]

    def invoke(self, request: TranscodeRequest) -> TranscodeOutcome:
        """Run ffmpeg for one file and report its outcome.

        Returns:
            succeeded() on exit status 0. failed() with ffmpeg's stderr on a
            non-zero status, or with the OS error if ffmpeg cannot be started.
        """
        tool_path = self.tool_path
        if tool_path is None:
            return TranscodeOutcome.failed(
                request.staging_path,
                f"{self.TOOL_NAME} not found in PATH; install it or set "
                "FASTSTART_FFMPEG_PATH",
            )

        cmd = self.build_command(tool_path, request)
        try:
            result = run_command(cmd)
        except OSError as e:
            logger.error("Failed to start %s: %s", tool_path, e)
            return TranscodeOutcome.failed(
                request.staging_path, f"Failed to start {tool_path}: {e}"
            )

        if result.returncode != 0:
            logger.debug(
                "ffmpeg exited with status %d for %s",
                result.returncode,
                request.source_path,
            )
            return TranscodeOutcome.failed(
                request.staging_path, result.stderr, result.returncode
            )

        return TranscodeOutcome.succeeded(request.staging_path)
