"""Registration DSL for hierarchical specs.

A Spec is an explicit, single-use run object::

    spec = Spec()
    with spec.describe("Stack"):
        spec.it("starts empty", lambda t: t.assert_equal(0, len(Stack())))
        with spec.describe("when pushed"):
            spec.it("is not empty", check_not_empty)
            spec.it("pops in LIFO order")  # no body: reported as skipped
    summary = spec.run()

There is no process-wide registry and nothing runs at interpreter exit; the
caller decides when ``run`` happens.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from spec_runner.execution.scheduler import ResultCallback, SequentialScheduler
from spec_runner.registration.tree import (
    Case,
    CaseBody,
    CaseRegistry,
    Context,
    caller_location,
)
from spec_runner.reporting.aggregator import RunSummary


class Spec:
    """Single-use run object: registers contexts and cases, then runs them once.

    describe() blocks nest through a stack of open contexts; it() attaches to
    the innermost one and records the caller as the registration site.
    """

    def __init__(self) -> None:
        self.registry = CaseRegistry()
        self._stack: list[Context] = [self.registry.root]
        self._ran = False

    @property
    def current(self) -> Context:
        """The innermost open context (the root outside any describe)."""
        return self._stack[-1]

    @contextmanager
    def describe(self, description: str) -> Generator[Context, None, None]:
        """Open a nested context for the duration of the with-block."""
        context = self.registry.open_context(description, parent=self.current)
        self._stack.append(context)
        try:
            yield context
        finally:
            self._stack.pop()

    def it(self, description: str, body: CaseBody | None = None) -> Case:
        """Register a case under the innermost open context.

        Args:
            description: Human-readable description of the case.
            body: Callable receiving an ``Assertions`` helper. Omit it to
                register a skipped placeholder.

        Returns:
            The registered Case.
        """
        return self.registry.add_case(
            self.current,
            description,
            body,
            location=caller_location(1),
        )

    def run(
        self,
        name_filter: str | None = None,
        on_result: ResultCallback | None = None,
    ) -> RunSummary:
        """Seal the registry and execute every registered case.

        Raises:
            RuntimeError: If the spec has already been run, or if called
                from inside an open describe block.
        """
        if self._ran:
            raise RuntimeError("Spec has already been run; build a new Spec per run")
        if len(self._stack) > 1:
            raise RuntimeError(f"Cannot run inside open context '{self.current.path}'")
        self._ran = True
        self.registry.seal()
        scheduler = SequentialScheduler(name_filter=name_filter, on_result=on_result)
        return scheduler.run(self.registry.root)
