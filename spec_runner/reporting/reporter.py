"""Report generation for spec runs.

Renders a RunSummary into the textual report, streams per-case progress
marks while a run is executing, and exports a structured YAML report.

Text layout::

    Finished in 0.001234s.

      1) Failed:
    L1 L2 B [spec.py:12]:
    Expected False to be truthy.

      2) Error:
    L1 C [spec.py:20]:
    ValueError: boom
        spec.py:5:in 'helper'
        spec.py:20:in 'body'

    2 tests, 1 assertions, 1 failures, 1 errors, 0 skips
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, TextIO

import yaml

from spec_runner.execution.outcome import ERROR, FAIL, PASS, SKIP, Error, Fail
from spec_runner.reporting.aggregator import CaseResult, RunSummary

PROGRESS_MARKS = {PASS: ".", FAIL: "F", ERROR: "E", SKIP: "S"}

SECTION_HEADERS = {FAIL: "Failed", ERROR: "Error", SKIP: "Skipped"}

SKIP_MESSAGE = "Skipped, no message given"


def summary_line(summary: RunSummary) -> str:
    return (
        f"{summary.tests} tests, {summary.assertions} assertions, "
        f"{summary.failures} failures, {summary.errors} errors, "
        f"{summary.skips} skips"
    )


def render_result(index: int, result: CaseResult) -> str:
    """Render one non-passing result as a numbered report record.

    Args:
        index: 1-based position in the report.
        result: A fail, error or skip result.

    Returns:
        The record text, without a trailing newline.
    """
    outcome = result.outcome
    lines = [
        f"{index:3d}) {SECTION_HEADERS[outcome.kind]}:",
        f"{result.path} [{outcome.location}]:",
    ]
    if isinstance(outcome, Fail):
        lines.append(outcome.message)
    elif isinstance(outcome, Error):
        lines.append(f"{outcome.exception_type}: {outcome.message}")
        lines.extend(f"    {frame}" for frame in outcome.backtrace)
    else:
        lines.append(SKIP_MESSAGE)
    return "\n".join(lines)


def render(summary: RunSummary) -> str:
    """Render the full textual report.

    Pure function of the summary: rendering the same summary twice yields
    identical text.
    """
    parts = [f"Finished in {summary.elapsed:.6f}s."]
    for index, result in enumerate(summary.reported, start=1):
        parts.append(render_result(index, result))
    parts.append(summary_line(summary))
    return "\n\n".join(parts) + "\n"


def generate_report(summary: RunSummary) -> dict[str, Any]:
    """Build the structured report dict, suitable for YAML serialization."""
    entries: list[dict[str, Any]] = []
    for result in summary.reported:
        outcome = result.outcome
        entry: dict[str, Any] = {
            "name": result.display_name,
            "path": list(result.path.parts),
            "status": outcome.kind,
            "file": outcome.location.file,
            "line": outcome.location.line,
            "assertions": outcome.assertions,
            "duration_seconds": round(result.duration, 6),
        }
        if isinstance(outcome, Fail):
            entry["message"] = outcome.message
        elif isinstance(outcome, Error):
            entry["message"] = outcome.message
            entry["exception"] = outcome.exception_type
            entry["backtrace"] = [str(frame) for frame in outcome.backtrace]
        entries.append(entry)

    return {
        "report": {
            "summary": {
                "tests": summary.tests,
                "assertions": summary.assertions,
                "passes": summary.passes,
                "failures": summary.failures,
                "errors": summary.errors,
                "skips": summary.skips,
                "elapsed_seconds": round(summary.elapsed, 6),
            },
            "results": entries,
        }
    }


def write_yaml(summary: RunSummary, path: Path) -> None:
    """Write the structured report as a YAML file.

    Args:
        summary: Terminal state of the run.
        path: File path to write the YAML report to.
    """
    report = generate_report(summary)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            report,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


class ProgressReporter:
    """Streams progress while a run executes, then prints the report.

    In the default mode one mark is printed per case (``.``, ``F``, ``E``
    or ``S``). In verbose mode each case gets its own line with its
    display name and duration.
    """

    def __init__(self, stream: TextIO | None = None, verbose: bool = False) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.verbose = verbose

    def start(self) -> None:
        self.stream.write("# Running:\n\n")

    def record(self, result: CaseResult) -> None:
        mark = PROGRESS_MARKS[result.kind]
        if self.verbose:
            self.stream.write(
                f"{result.path}#{result.display_name} = "
                f"{result.duration:.2f} s = {mark}\n"
            )
        else:
            self.stream.write(mark)
        self.stream.flush()

    def finish(self, summary: RunSummary) -> None:
        self.stream.write("\n\n")
        self.stream.write(render(summary))
        self.stream.flush()
