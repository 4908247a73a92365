"""Configuration management for faststart.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (FASTSTART_*)
3. Config file (~/.faststart/config.toml)
4. Default values (lowest priority)
"""

from faststart.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from faststart.config.env import EnvReader
from faststart.config.loader import get_config, get_default_config_path
from faststart.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from faststart.config.models import (
    DEFAULT_EXTENSIONS,
    FaststartConfig,
    LoggingConfig,
    ScanConfig,
    ToolPathsConfig,
)
from faststart.config.toml_parser import TomlParseError, load_toml_file

__all__ = [
    # Models
    "DEFAULT_EXTENSIONS",
    "FaststartConfig",
    "LoggingConfig",
    "ScanConfig",
    "ToolPathsConfig",
    # Loader
    "get_config",
    "get_default_config_path",
    # Layering
    "EnvReader",
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
    # Logging
    "build_logging_config",
    "configure_logging_from_cli",
    # TOML
    "TomlParseError",
    "load_toml_file",
]
