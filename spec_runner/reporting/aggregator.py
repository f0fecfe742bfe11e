"""Run-wide result aggregation.

Collects one CaseResult per executed case and keeps the counters that make
up the final RunSummary.
"""

from __future__ import annotations

from dataclasses import dataclass

from spec_runner.execution.outcome import ERROR, FAIL, PASS, SKIP, Outcome
from spec_runner.registration.tree import DescriptionPath


@dataclass(frozen=True)
class CaseResult:
    """Result of a single case execution."""

    path: DescriptionPath
    outcome: Outcome
    display_name: str = ""
    duration: float = 0.0

    @property
    def kind(self) -> str:
        return self.outcome.kind


@dataclass(frozen=True)
class RunSummary:
    """Terminal state of one run."""

    tests: int = 0
    assertions: int = 0
    passes: int = 0
    failures: int = 0
    errors: int = 0
    skips: int = 0
    reported: tuple[CaseResult, ...] = ()
    elapsed: float = 0.0

    @property
    def passed(self) -> bool:
        return self.failures == 0 and self.errors == 0


class ResultAggregator:
    """Accumulates counters and non-passing results in encounter order.

    Strictly additive: results are never reordered or deduplicated, so
    two cases sharing a Description Path each keep their own entry.
    """

    def __init__(self) -> None:
        self.counts: dict[str, int] = {PASS: 0, FAIL: 0, ERROR: 0, SKIP: 0}
        self.tests = 0
        self.assertions = 0
        self.reported: list[CaseResult] = []
        self.elapsed = 0.0

    def record(
        self,
        path: DescriptionPath,
        outcome: Outcome,
        display_name: str = "",
        duration: float = 0.0,
    ) -> CaseResult:
        """Record the outcome of one case.

        Args:
            path: Full Description Path of the case.
            outcome: Classified outcome.
            display_name: Sequence-derived name of the case.
            duration: Wall time spent executing the case, in seconds.

        Returns:
            The stored CaseResult.

        Raises:
            ValueError: If the outcome kind is unknown.
        """
        if outcome.kind not in self.counts:
            raise ValueError(f"Unknown outcome kind: {outcome.kind}")

        result = CaseResult(
            path=path,
            outcome=outcome,
            display_name=display_name,
            duration=duration,
        )
        self.tests += 1
        self.counts[outcome.kind] += 1
        self.assertions += outcome.assertions
        if outcome.kind != PASS:
            self.reported.append(result)
        return result

    def summary(self) -> RunSummary:
        return RunSummary(
            tests=self.tests,
            assertions=self.assertions,
            passes=self.counts[PASS],
            failures=self.counts[FAIL],
            errors=self.counts[ERROR],
            skips=self.counts[SKIP],
            reported=tuple(self.reported),
            elapsed=self.elapsed,
        )
