"""Running external tools.

ffmpeg is the only tool faststart runs. Output is always captured as text,
with undecodable bytes replaced, so diagnostics can be logged verbatim.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - ffmpeg is run as an external process
import time
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Captured output and exit status of a finished process."""

    stdout: str
    stderr: str
    returncode: int


def run_command(
    args: list[str | Path], timeout: float | None = None
) -> CommandResult:
    """Run args to completion and capture its output.

    Args:
        args: Executable and arguments; Path items are converted to str.
        timeout: Seconds to wait. None waits until the process exits.

    Raises:
        OSError: If the executable cannot be started.
        subprocess.TimeoutExpired: If timeout is set and exceeded.
    """
    argv = [str(arg) for arg in args]
    logger.debug("Executing command: %s", " ".join(argv))

    started = time.monotonic()
    completed = subprocess.run(  # nosec B603 - argv is built by the caller
        argv,
        capture_output=True,
        text=True,
        errors="replace",
        timeout=timeout,
    )
    logger.debug(
        "%s exited with status %d after %.2fs",
        Path(argv[0]).name,
        completed.returncode,
        time.monotonic() - started,
    )

    return CommandResult(
        completed.stdout or "", completed.stderr or "", completed.returncode
    )
