"""Case execution: outcome classification and assertion helpers."""

from spec_runner.execution.assertions import AssertionFailure, Assertions
from spec_runner.execution.classifier import classify
from spec_runner.execution.outcome import Error, Fail, Frame, Outcome, Pass, Skip

__all__ = [
    "AssertionFailure",
    "Assertions",
    "Error",
    "Fail",
    "Frame",
    "Outcome",
    "Pass",
    "Skip",
    "classify",
]
