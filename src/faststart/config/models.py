"""Configuration data models for faststart."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_EXTENSIONS = ["mp4"]


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    If ffmpeg is not specified, it is looked up in PATH.
    """

    ffmpeg: Path | None = None


@dataclass
class ScanConfig:
    """Configuration for candidate discovery."""

    # File extensions eligible for optimization, without the leading dot
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))

    # Compare extensions case-sensitively (".MP4" is skipped when True)
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        """Normalize and validate extensions."""
        normalized = [ext.strip().lstrip(".") for ext in self.extensions]
        normalized = [ext for ext in normalized if ext]
        if not normalized:
            raise ValueError("extensions must contain at least one extension")
        self.extensions = normalized


@dataclass
class LoggingConfig:
    """Configuration for logging output."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes < 0:
            raise ValueError(f"max_bytes must be >= 0, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(f"backup_count must be >= 0, got {self.backup_count}")


@dataclass
class FaststartConfig:
    """Main configuration container."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
