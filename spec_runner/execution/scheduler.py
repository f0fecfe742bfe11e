"""Depth-first case scheduler.

Walks the Context tree in pre-order: a context's own cases run first, in
registration order, then each child context in registration order. Every
reached case is classified exactly once and recorded with its full
Description Path.
"""

from __future__ import annotations

import re
import time
from typing import Callable

from spec_runner.execution.classifier import classify
from spec_runner.registration.tree import Case, Context
from spec_runner.reporting.aggregator import CaseResult, ResultAggregator, RunSummary

ResultCallback = Callable[[CaseResult], None]


class SequentialScheduler:
    """Executes cases one at a time in traversal order.

    Supports an optional name filter (a regular expression searched in the
    case's display name and its rendered Description Path) and an optional
    callback invoked after each recorded result.
    """

    def __init__(
        self,
        aggregator: ResultAggregator | None = None,
        name_filter: str | None = None,
        on_result: ResultCallback | None = None,
    ) -> None:
        self.aggregator = aggregator or ResultAggregator()
        self.name_filter = re.compile(name_filter) if name_filter else None
        self.on_result = on_result
        self._used = False

    def run(self, root: Context) -> RunSummary:
        """Execute every case reachable from root.

        Args:
            root: Context to start the traversal from.

        Returns:
            RunSummary of the run.

        Raises:
            RuntimeError: If the scheduler has already run.
        """
        if self._used:
            raise RuntimeError("Scheduler has already run; create a new one per run")
        self._used = True

        start_time = time.monotonic()
        stack = [root]
        while stack:
            context = stack.pop()
            for case in context.cases:
                if self._selected(case):
                    self._run_case(case)
            stack.extend(reversed(context.children))

        self.aggregator.elapsed = time.monotonic() - start_time
        return self.aggregator.summary()

    def _selected(self, case: Case) -> bool:
        if self.name_filter is None:
            return True
        return bool(
            self.name_filter.search(case.display_name)
            or self.name_filter.search(str(case.path))
        )

    def _run_case(self, case: Case) -> None:
        start_time = time.monotonic()
        outcome = classify(case)
        duration = time.monotonic() - start_time

        result = self.aggregator.record(
            case.path,
            outcome,
            display_name=case.display_name,
            duration=duration,
        )
        if self.on_result is not None:
            self.on_result(result)
