"""Unit tests for report rendering and YAML export."""

from __future__ import annotations

import io
import tempfile
from pathlib import Path

import yaml

from spec_runner.execution.outcome import Error, Fail, Frame, Pass, Skip
from spec_runner.registration.tree import DescriptionPath, Location
from spec_runner.reporting.aggregator import CaseResult, ResultAggregator, RunSummary
from spec_runner.reporting.reporter import (
    ProgressReporter,
    generate_report,
    render,
    render_result,
    summary_line,
    write_yaml,
)


def _path(*parts):
    return DescriptionPath(tuple(parts))


def _mixed_summary() -> RunSummary:
    agg = ResultAggregator()
    agg.record(_path("L1", "A"), Pass(assertions=1), display_name="test_0001_a")
    agg.record(
        _path("L1", "L2", "B"),
        Fail("Expected False to be truthy.", Location("spec.py", 12), assertions=1),
        display_name="test_0002_b",
    )
    agg.record(
        _path("L1", "C"),
        Error(
            "boom",
            Location("helpers.py", 5),
            backtrace=(
                Frame("helpers.py", 5, "helper_b"),
                Frame("helpers.py", 8, "helper_a"),
                Frame("spec.py", 20, "body"),
            ),
            exception_type="ValueError",
        ),
        display_name="test_0003_c",
    )
    agg.record(
        _path("blockless it", "should be reported as a skipped spec"),
        Skip(Location("spec.py", 30)),
        display_name="test_0004_should_be_reported_as_a_skipped_spec",
    )
    agg.elapsed = 0.25
    return agg.summary()


class TestSummaryLine:
    """Tests for the run-summary counters line."""

    def test_all_counters_present(self):
        line = summary_line(_mixed_summary())
        assert line == "4 tests, 2 assertions, 1 failures, 1 errors, 1 skips"

    def test_empty_run(self):
        assert summary_line(RunSummary()) == (
            "0 tests, 0 assertions, 0 failures, 0 errors, 0 skips"
        )


class TestRenderRecords:
    """Tests for per-result record rendering."""

    def test_failed_record(self):
        summary = _mixed_summary()
        text = render_result(1, summary.reported[0])
        assert text == (
            "  1) Failed:\n"
            "L1 L2 B [spec.py:12]:\n"
            "Expected False to be truthy."
        )

    def test_error_record_with_backtrace(self):
        summary = _mixed_summary()
        text = render_result(2, summary.reported[1])
        assert text == (
            "  2) Error:\n"
            "L1 C [helpers.py:5]:\n"
            "ValueError: boom\n"
            "    helpers.py:5:in 'helper_b'\n"
            "    helpers.py:8:in 'helper_a'\n"
            "    spec.py:20:in 'body'"
        )

    def test_skipped_record(self):
        summary = _mixed_summary()
        text = render_result(3, summary.reported[2])
        assert text == (
            "  3) Skipped:\n"
            "blockless it should be reported as a skipped spec [spec.py:30]:\n"
            "Skipped, no message given"
        )


class TestRender:
    """Tests for the full textual report."""

    def test_sections_in_encounter_order(self):
        text = render(_mixed_summary())
        assert text.index("Failed:\n") < text.index("Error:\n") < text.index("Skipped:\n")

    def test_required_substrings(self):
        text = render(_mixed_summary())
        assert "4 tests" in text
        assert "2 assertions" in text
        assert "1 failures" in text
        assert "1 errors" in text
        assert "1 skips" in text
        assert "Skipped:\nblockless it should be reported as a skipped spec [spec.py:30]" in text
        assert "Failed:\nL1 L2 B [spec.py:12]" in text
        assert "Error:\nL1 C [helpers.py:5]" in text

    def test_passing_cases_not_listed(self):
        text = render(_mixed_summary())
        assert "L1 A" not in text

    def test_render_is_idempotent(self):
        summary = _mixed_summary()
        assert render(summary) == render(summary)

    def test_finished_line_and_trailing_newline(self):
        text = render(_mixed_summary())
        assert text.startswith("Finished in 0.250000s.\n\n")
        assert text.endswith("1 skips\n")

    def test_clean_run_has_no_records(self):
        text = render(RunSummary(tests=2, assertions=2, passes=2))
        assert text == (
            "Finished in 0.000000s.\n\n"
            "2 tests, 2 assertions, 0 failures, 0 errors, 0 skips\n"
        )


class TestProgressReporter:
    """Tests for streamed progress output."""

    def _result(self, outcome, name="test_0001_x", duration=0.0):
        return CaseResult(_path("ctx", "x"), outcome, display_name=name, duration=duration)

    def test_marks(self):
        stream = io.StringIO()
        reporter = ProgressReporter(stream)
        loc = Location("spec.py", 1)
        for outcome in (Pass(), Fail("f", loc), Error("e", loc), Skip(loc)):
            reporter.record(self._result(outcome))
        assert stream.getvalue() == ".FES"

    def test_verbose_line(self):
        stream = io.StringIO()
        reporter = ProgressReporter(stream, verbose=True)
        reporter.record(self._result(Pass(), duration=0.5))
        assert stream.getvalue() == "ctx x#test_0001_x = 0.50 s = .\n"

    def test_start_and_finish(self):
        stream = io.StringIO()
        reporter = ProgressReporter(stream)
        summary = _mixed_summary()
        reporter.start()
        reporter.finish(summary)
        out = stream.getvalue()
        assert out.startswith("# Running:\n\n")
        assert out.endswith(render(summary))


class TestYamlOutput:
    """Tests for the structured YAML report."""

    def test_generate_report_structure(self):
        report = generate_report(_mixed_summary())["report"]
        assert report["summary"]["tests"] == 4
        assert report["summary"]["skips"] == 1
        statuses = [r["status"] for r in report["results"]]
        assert statuses == ["fail", "error", "skip"]
        error = report["results"][1]
        assert error["exception"] == "ValueError"
        assert error["backtrace"][0] == "helpers.py:5:in 'helper_b'"
        assert report["results"][2]["name"] == (
            "test_0004_should_be_reported_as_a_skipped_spec"
        )

    def test_write_yaml_roundtrip(self):
        summary = _mixed_summary()
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "subdir" / "report.yaml"
            write_yaml(summary, path)

            assert path.exists()
            loaded = yaml.safe_load(path.read_text())
            assert loaded == generate_report(summary)
