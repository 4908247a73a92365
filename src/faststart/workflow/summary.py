"""Run summary for directory optimization runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from faststart.executor.optimize import OptimizeResult


@dataclass
class RunSummary:
    """Ordered per-file outcomes of one run.

    total is fixed when discovery finishes; entries grow as files are
    processed. Used only for reporting.
    """

    total: int
    entries: list[tuple[Path, OptimizeResult]] = field(default_factory=list)

    def record(self, result: OptimizeResult) -> None:
        """Append the outcome for one candidate."""
        self.entries.append((result.source_path, result))

    @property
    def processed(self) -> int:
        return len(self.entries)

    @property
    def succeeded(self) -> int:
        return sum(1 for _, result in self.entries if result.success)

    @property
    def failures(self) -> list[OptimizeResult]:
        return [result for _, result in self.entries if not result.success]

    @property
    def severe_failures(self) -> list[OptimizeResult]:
        return [result for result in self.failures if result.is_severe]

    def summary_text(self) -> str:
        """One-line summary, e.g. "Optimized 8 of 10 files, 2 failed"."""
        failed = len(self.failures)
        text = f"Optimized {self.succeeded} of {self.total} files"
        if failed:
            text += f", {failed} failed"
        severe = len(self.severe_failures)
        if severe:
            text += f" ({severe} need manual cleanup)"
        return text
