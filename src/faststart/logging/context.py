"""Per-file context for structured logging.

The file currently being optimized and its position in the run are kept in
contextvars and injected into every log record by FileContextFilter.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from faststart.core.formatting import format_position

if TYPE_CHECKING:
    from collections.abc import Generator

_file_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_path", default=None
)
_file_position: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_position", default=None
)


@contextmanager
def file_context(
    file_path: Path | str,
    index: int | None = None,
    total: int | None = None,
) -> Generator[None, None, None]:
    """Context manager that tags log records with the file being processed.

    Args:
        file_path: Path of the file being optimized.
        index: 1-based position of the file in the run, if known.
        total: Number of files in the run, if known.

    Example:
        with file_context("/videos/a.mp4", 3, 10):
            logger.info("Optimizing")  # text tag: "[003/010] "
    """
    position = (
        format_position(index, total)
        if index is not None and total is not None
        else None
    )
    path_token = _file_path.set(str(file_path))
    position_token = _file_position.set(position)
    try:
        yield
    finally:
        _file_path.reset(path_token)
        _file_position.reset(position_token)


def get_file_context() -> tuple[str | None, str | None]:
    """Get current file context.

    Returns:
        Tuple of (file_path, position), either may be None.
    """
    return _file_path.get(), _file_position.get()


class FileContextFilter(logging.Filter):
    """Logging filter that injects file context into log records.

    Adds file_path and file_position attributes for JSON output, and a
    compact file_tag like "[003/010] " for the text format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        file_path, position = get_file_context()

        record.file_path = file_path
        record.file_position = position
        record.file_tag = f"[{position}] " if position else ""

        return True
