"""CLI module for faststart."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from faststart.cli.exit_codes import ExitCode
from faststart.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _log_startup_settings(target: Path, argv: list[str]) -> None:
    """Log the invocation at debug level."""
    logger.debug("Program name: %s", Path(argv[0]).name if argv else "faststart")
    for i, arg in enumerate(argv[1:], start=1):
        logger.debug("  Argument %d: %s", i, arg)
    logger.debug("Target path: %s", target)


@click.command()
@click.version_option(package_name="faststart")
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Config file (default: ~/.faststart/config.toml).",
)
@click.option(
    "--ffmpeg",
    "ffmpeg_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the ffmpeg executable (default: looked up in PATH).",
)
@click.option(
    "--ignore-case",
    is_flag=True,
    default=False,
    help="Match file extensions case-insensitively (e.g. .MP4).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
def main(
    path: Path | None,
    config_path: Path | None,
    ffmpeg_path: Path | None,
    ignore_case: bool,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Optimize MP4 files at PATH for fast-start playback.

    PATH may be a single .mp4 file or a directory, which is searched
    recursively. Each file is re-multiplexed with ffmpeg (stream copy,
    +faststart) and the result replaces the original.
    """
    if path is None:
        click.echo("Error: No target path provided.", err=True)
        click.echo("Usage: faststart [OPTIONS] PATH", err=True)
        sys.exit(ExitCode.NO_ARGUMENT)

    from faststart.config import configure_logging_from_cli, get_config
    from faststart.executor import FFmpegFaststartTranscoder
    from faststart.workflow import OptimizeProcessor

    try:
        config = get_config(
            config_path=config_path,
            ffmpeg_path=ffmpeg_path,
            case_sensitive=False if ignore_case else None,
            strict=True,
        )
        configure_logging_from_cli(
            config.logging,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except (ConfigError, ValueError) as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    _log_startup_settings(path, sys.argv)

    processor = OptimizeProcessor(
        FFmpegFaststartTranscoder(config.tools.ffmpeg),
        config.scan,
    )
    sys.exit(processor.run(path))
