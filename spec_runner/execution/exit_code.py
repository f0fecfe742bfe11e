"""Exit code computation for a finished run.

A run succeeds (exit code 0) iff it has no failures and no errors. Skipped
cases are placeholders and never block.
"""

from __future__ import annotations

from spec_runner.reporting.aggregator import RunSummary

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def compute_exit_code(summary: RunSummary) -> int:
    """Map a RunSummary to a process exit status.

    Args:
        summary: Terminal state of the run.

    Returns:
        ``EXIT_SUCCESS`` when failures and errors are both zero,
        ``EXIT_FAILURE`` otherwise.
    """
    return EXIT_SUCCESS if summary.passed else EXIT_FAILURE
