"""Structured logging module for faststart.

Provides configurable logging with JSON format support, file rotation and
per-file context tagging.
"""

from faststart.logging.config import configure_logging
from faststart.logging.context import (
    FileContextFilter,
    file_context,
    get_file_context,
)
from faststart.logging.handlers import JSONFormatter

__all__ = [
    "FileContextFilter",
    "JSONFormatter",
    "configure_logging",
    "file_context",
    "get_file_context",
]
