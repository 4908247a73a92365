"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building FaststartConfig by composing
configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from faststart.config.env import EnvReader
from faststart.config.models import (
    DEFAULT_EXTENSIONS,
    FaststartConfig,
    LoggingConfig,
    ScanConfig,
    ToolPathsConfig,
)
from faststart.exceptions import ConfigError


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values mean "not specified in this source" and do not override
    values from lower-precedence sources.
    """

    # Tool paths
    ffmpeg_path: Path | None = None

    # Scan config
    scan_extensions: list[str] | None = None
    scan_case_sensitive: bool | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds FaststartConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._sources: dict[str, str] = {}

    def apply(self, source: ConfigSource, source_name: str = "unknown") -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
            source_name: Label recorded for each value set ("file", "env",
                "cli"), reported by source_of().
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value
                self._sources[field_obj.name] = source_name

    def source_of(self, key: str) -> str:
        """Return which source set a value, or "default"."""
        return self._sources.get(key, "default")

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> FaststartConfig:
        """Build the final FaststartConfig with defaults for unset values.

        Raises:
            ValueError: If a resolved value fails model validation.
        """
        tools = ToolPathsConfig(ffmpeg=self._get("ffmpeg_path", None))

        extensions = self._get("scan_extensions", DEFAULT_EXTENSIONS)
        if isinstance(extensions, str):
            extensions = [extensions]
        scan = ScanConfig(
            extensions=list(extensions),
            case_sensitive=self._get("scan_case_sensitive", True),
        )

        logging_config = LoggingConfig(
            level=self._get("logging_level", "info"),
            file=self._get("logging_file", None),
            format=self._get("logging_format", "text"),
            include_stderr=self._get("logging_include_stderr", False),
            max_bytes=self._get("logging_max_bytes", 10_485_760),
            backup_count=self._get("logging_backup_count", 5),
        )

        return FaststartConfig(tools=tools, scan=scan, logging=logging_config)


def _table(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level table, or {} if absent.

    Raises:
        ConfigError: If the key is present but is not a table.
    """
    table = file_config.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(table).__name__}")
    return table


def _value(table: dict[str, Any], section: str, key: str, expected: type) -> Any:
    """Return table[key] if it has the expected type, None if absent.

    Raises:
        ConfigError: If the value has another type.
    """
    value = table.get(key)
    if value is None:
        return None
    # bool is a subclass of int but never a valid count
    if not isinstance(value, expected) or (
        expected is int and isinstance(value, bool)
    ):
        raise ConfigError(
            f"{section}.{key} must be of type {expected.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _extensions(table: dict[str, Any]) -> list[str] | None:
    value = table.get("extensions")
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError("scan.extensions must be a list of strings")
    return value


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from a parsed config file.

    Expected layout::

        [tools]
        ffmpeg = "/usr/local/bin/ffmpeg"

        [scan]
        extensions = ["mp4", "m4v"]
        case_sensitive = false

        [logging]
        level = "debug"
        file = "~/.faststart/faststart.log"

    Raises:
        ConfigError: If a section or value has the wrong type.
    """
    tools = _table(file_config, "tools")
    scan = _table(file_config, "scan")
    logging_conf = _table(file_config, "logging")

    ffmpeg = _value(tools, "tools", "ffmpeg", str)
    log_file = _value(logging_conf, "logging", "file", str)

    return ConfigSource(
        ffmpeg_path=Path(ffmpeg).expanduser() if ffmpeg else None,
        scan_extensions=_extensions(scan),
        scan_case_sensitive=_value(scan, "scan", "case_sensitive", bool),
        logging_level=_value(logging_conf, "logging", "level", str),
        logging_file=Path(log_file).expanduser() if log_file else None,
        logging_format=_value(logging_conf, "logging", "format", str),
        logging_include_stderr=_value(logging_conf, "logging", "include_stderr", bool),
        logging_max_bytes=_value(logging_conf, "logging", "max_bytes", int),
        logging_backup_count=_value(logging_conf, "logging", "backup_count", int),
    )



def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from FASTSTART_* environment variables."""
    return ConfigSource(
        ffmpeg_path=reader.get_path("FASTSTART_FFMPEG_PATH"),
        scan_extensions=reader.get_list("FASTSTART_EXTENSIONS"),
        scan_case_sensitive=reader.get_bool("FASTSTART_CASE_SENSITIVE"),
        logging_level=reader.get_str("FASTSTART_LOG_LEVEL"),
        logging_file=reader.get_path("FASTSTART_LOG_FILE", must_exist=False),
        logging_format=reader.get_str("FASTSTART_LOG_FORMAT"),
        logging_max_bytes=reader.get_int("FASTSTART_LOG_MAX_BYTES"),
        logging_backup_count=reader.get_int("FASTSTART_LOG_BACKUP_COUNT"),
    )
