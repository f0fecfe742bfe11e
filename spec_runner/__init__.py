"""Hierarchical spec runner: describe/it registration, execution and reporting."""

from spec_runner.execution.assertions import AssertionFailure, Assertions
from spec_runner.main import main
from spec_runner.reporting.aggregator import RunSummary
from spec_runner.reporting.reporter import render
from spec_runner.spec import Spec

__all__ = [
    "AssertionFailure",
    "Assertions",
    "RunSummary",
    "Spec",
    "main",
    "render",
]
