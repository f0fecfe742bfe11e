"""Tests for run exit code computation."""

from __future__ import annotations

from spec_runner.execution.exit_code import EXIT_FAILURE, EXIT_SUCCESS, compute_exit_code
from spec_runner.reporting.aggregator import RunSummary


class TestComputeExitCode:
    def test_empty_run_succeeds(self):
        assert compute_exit_code(RunSummary()) == EXIT_SUCCESS

    def test_all_passing_succeeds(self):
        assert compute_exit_code(RunSummary(tests=3, passes=3)) == EXIT_SUCCESS

    def test_skips_do_not_block(self):
        summary = RunSummary(tests=2, passes=1, skips=1)
        assert compute_exit_code(summary) == EXIT_SUCCESS

    def test_failure_blocks(self):
        summary = RunSummary(tests=2, passes=1, failures=1)
        assert compute_exit_code(summary) == EXIT_FAILURE

    def test_error_blocks(self):
        summary = RunSummary(tests=1, errors=1)
        assert compute_exit_code(summary) == EXIT_FAILURE

    def test_exit_codes_distinct(self):
        assert EXIT_SUCCESS == 0
        assert EXIT_FAILURE != 0
