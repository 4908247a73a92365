"""Workflow module: the traversal driver and its run summary."""

from faststart.workflow.processor import OptimizeProcessor, report_result
from faststart.workflow.summary import RunSummary

__all__ = [
    "OptimizeProcessor",
    "RunSummary",
    "report_result",
]
