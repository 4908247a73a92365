"""Traversal driver: resolve a target and optimize every candidate.

Structural problems (missing target, wrong kind of path, unreadable
directory) end the run with a distinct exit code. Per-file failures in a
directory run are logged and the run moves on; the exit code stays
SUCCESS. A single-file run fails if its one file fails.
"""

from __future__ import annotations

import logging
from pathlib import Path

from faststart.cli.exit_codes import ExitCode
from faststart.config.models import ScanConfig
from faststart.exceptions import (
    DirectoryEnumerationError,
    NotFileOrDirectoryError,
    TargetNotFoundError,
    UnsupportedFileKindError,
)
from faststart.executor.interface import Transcoder
from faststart.executor.optimize import OptimizeResult, optimize_file
from faststart.logging.context import file_context
from faststart.scanner.discovery import (
    TargetKind,
    classify_target,
    discover_candidates,
    matches_extension,
)
from faststart.workflow.summary import RunSummary

logger = logging.getLogger(__name__)


def report_result(result: OptimizeResult) -> None:
    """Log a per-file outcome at a level matching its severity."""
    if result.success:
        logger.info(result.describe())
    elif result.is_severe:
        logger.critical(result.describe())
    else:
        logger.error(result.describe())


class OptimizeProcessor:
    """Runs fast-start optimization over a file or directory tree.

    Processing is sequential: each file is fully transcoded and replaced
    before the next one starts.
    """

    def __init__(self, transcoder: Transcoder, scan: ScanConfig | None = None):
        """Initialize the processor.

        Args:
            transcoder: External re-multiplexer used for every file.
            scan: Extension filter settings. Defaults to ScanConfig().
        """
        self.transcoder = transcoder
        self.scan = scan or ScanConfig()

    def run(self, target: Path) -> ExitCode:
        """Optimize target and return the run's exit code."""
        try:
            kind = classify_target(target)
            if kind is TargetKind.MISSING:
                raise TargetNotFoundError(target)
            if kind is TargetKind.FILE:
                return self.run_file(target)
            if kind is TargetKind.DIRECTORY:
                self.run_directory(target)
                return ExitCode.SUCCESS
            raise NotFileOrDirectoryError(target)
        except TargetNotFoundError as e:
            logger.error(str(e))
            return ExitCode.TARGET_NOT_FOUND
        except UnsupportedFileKindError as e:
            logger.error(str(e))
            return ExitCode.UNSUPPORTED_FILE_KIND
        except NotFileOrDirectoryError as e:
            logger.error(str(e))
            return ExitCode.NOT_FILE_OR_DIRECTORY
        except DirectoryEnumerationError as e:
            logger.error(str(e))
            return ExitCode.ENUMERATION_FAILED

    def run_file(self, path: Path) -> ExitCode:
        """Optimize a single file.

        Raises:
            UnsupportedFileKindError: If the extension does not match.
        """
        if not matches_extension(path, self.scan.extensions, self.scan.case_sensitive):
            raise UnsupportedFileKindError(path, self.scan.extensions)

        with file_context(path):
            result = optimize_file(path, self.transcoder)
            report_result(result)

        return ExitCode.SUCCESS if result.success else ExitCode.OPTIMIZE_FAILED

    def run_directory(self, root: Path) -> RunSummary:
        """Optimize every candidate under root.

        Returns:
            RunSummary with one entry per discovered candidate.

        Raises:
            DirectoryEnumerationError: If the tree cannot be enumerated.
        """
        candidates = discover_candidates(
            root, self.scan.extensions, self.scan.case_sensitive
        )
        summary = RunSummary(total=len(candidates))
        logger.info("Found %d file(s) to optimize in %s", summary.total, root)

        for index, path in enumerate(candidates, start=1):
            with file_context(path, index, summary.total):
                result = optimize_file(path, self.transcoder)
                report_result(result)
            summary.record(result)

        logger.info(summary.summary_text())
        for result in summary.severe_failures:
            logger.critical(
                "Manual cleanup required: %s -> %s",
                result.staging_path,
                result.source_path,
            )
        return summary
