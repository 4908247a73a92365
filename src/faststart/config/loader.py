"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (FASTSTART_*)
3. Config file (~/.faststart/config.toml)
4. Default values

Environment variables:
- FASTSTART_CONFIG_PATH: Path to config file (overrides default location)
- FASTSTART_FFMPEG_PATH: Path to ffmpeg executable
- FASTSTART_EXTENSIONS: Comma-separated extensions to optimize
- FASTSTART_CASE_SENSITIVE: Match extensions case-sensitively (true/false)
- FASTSTART_LOG_LEVEL: debug, info, warning or error
- FASTSTART_LOG_FILE: Log file path
- FASTSTART_LOG_FORMAT: text or json
- FASTSTART_LOG_MAX_BYTES: Log file rotation threshold in bytes
- FASTSTART_LOG_BACKUP_COUNT: Number of rotated log files to keep
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from faststart.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from faststart.config.env import EnvReader
from faststart.config.models import FaststartConfig
from faststart.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".faststart"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path() -> Path:
    """Get the config file path, honoring FASTSTART_CONFIG_PATH."""
    env_path = os.environ.get("FASTSTART_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    case_sensitive: bool | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> FaststartConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides FASTSTART_CONFIG_PATH).
        ffmpeg_path: CLI override for ffmpeg path.
        case_sensitive: CLI override for extension matching.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise TomlParseError on config file parse failures.

    Returns:
        FaststartConfig with merged configuration.

    Raises:
        TomlParseError: When strict=True and the config file cannot be parsed.
        ValueError: When a merged value fails validation.
    """
    reader = env_reader or EnvReader()
    path = config_path if config_path is not None else get_default_config_path()

    file_config = load_toml_file(path, strict=strict)

    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config), source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(
        ConfigSource(ffmpeg_path=ffmpeg_path, scan_case_sensitive=case_sensitive),
        source_name="cli",
    )

    config = builder.build()
    logger.debug(
        "Configuration loaded from %s: extensions=%s (%s), case_sensitive=%s (%s)",
        path,
        config.scan.extensions,
        builder.source_of("scan_extensions"),
        config.scan.case_sensitive,
        builder.source_of("scan_case_sensitive"),
    )
    return config
