"""Result aggregation and report generation: text and YAML."""

from spec_runner.reporting.aggregator import CaseResult, ResultAggregator, RunSummary
from spec_runner.reporting.reporter import ProgressReporter, render, write_yaml

__all__ = [
    "CaseResult",
    "ProgressReporter",
    "ResultAggregator",
    "RunSummary",
    "render",
    "write_yaml",
]
