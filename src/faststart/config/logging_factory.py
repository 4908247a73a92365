"""Command-line overrides for the logging section of the configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from faststart.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return a copy of base with every non-None override applied.

    Rotation settings have no command-line option and always come from base.

    Raises:
        ValueError: If an override fails LoggingConfig validation.
    """
    overrides = {
        "level": level,
        "file": file,
        "format": format,
        "include_stderr": include_stderr,
    }
    return dataclasses.replace(
        base, **{key: value for key, value in overrides.items() if value is not None}
    )


def configure_logging_from_cli(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Configure logging from base plus command-line overrides.

    Returns:
        The LoggingConfig that was applied.
    """
    from faststart.logging import configure_logging

    final_config = build_logging_config(
        base, level=level, file=file, format=format, include_stderr=include_stderr
    )
    configure_logging(final_config)
    return final_config
