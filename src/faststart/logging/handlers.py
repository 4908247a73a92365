"""JSON log output for faststart.

One object per line::

    {"timestamp": "...", "level": "ERROR", "logger": "faststart.executor.optimize",
     "message": "...", "file": "/videos/a.mp4", "position": "003/010",
     "context": {"returncode": 1}}
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord has; anything else on a record came from extra=
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

# Set by FileContextFilter; emitted as top-level keys instead of context
_FILE_ATTRS = frozenset({"file_path", "file_position", "file_tag"})


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    The file being optimized and its run position, when known, are
    top-level "file" and "position" keys. Fields passed via extra= go
    under "context".
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        file_path = getattr(record, "file_path", None)
        if file_path:
            entry["file"] = file_path
        position = getattr(record, "file_position", None)
        if position:
            entry["position"] = position

        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
            and key not in _FILE_ATTRS
            and not key.startswith("_")
        }
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
