"""Root logger setup for a faststart run."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from faststart.logging.context import FileContextFilter
from faststart.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from faststart.config.models import LoggingConfig

# file_tag is "[003/010] " while a directory run is on its third of ten files
TEXT_FORMAT = "%(asctime)s - %(file_tag)s%(name)s - %(levelname)s - %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _make_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    """Open the rotating log file, or None if it cannot be created.

    Failure is reported on stderr since no logging is set up yet.
    """
    if not config.file:
        return None
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {config.file}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to config.

    Output goes to the log file if one is configured and can be opened,
    otherwise to stderr. include_stderr adds stderr next to the file.
    """
    level = logging.getLevelName(config.level.upper())

    handlers: list[logging.Handler] = []
    file_handler = _open_log_file(config)
    if file_handler is not None:
        handlers.append(file_handler)
    if file_handler is None or config.include_stderr:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = _make_formatter(config)
    context_filter = FileContextFilter()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)
