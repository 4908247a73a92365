"""TOML config file loading."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from faststart.exceptions import ConfigError

logger = logging.getLogger(__name__)


class TomlParseError(ConfigError):
    """Config file exists but is not valid TOML."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse config file {path}: {cause}")


def load_toml_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.
        strict: If True, raise TomlParseError when the file cannot be read
            or parsed. If False, log a warning and return an empty dict.

    Returns:
        Parsed dictionary. Empty dict if the file doesn't exist.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise TomlParseError(path, e) from e
        logger.warning("Failed to parse config file %s: %s", path, e)
        return {}
