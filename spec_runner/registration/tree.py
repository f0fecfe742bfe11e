"""Context/Case tree for hierarchical spec registration.

Provides Context (a nestable description node) and Case (a unit of execution
attached to exactly one Context), plus CaseRegistry which builds the tree.

Identity is positional: a node is owned by its parent and is never looked up
or merged by its description text, so duplicate descriptions stay separate.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from typing import Any, Callable

CaseBody = Callable[[Any], Any]

_NON_WORD = re.compile(r"\W+")


@dataclass(frozen=True)
class Location:
    """A (file, line) source position."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def caller_location(depth: int) -> Location:
    """Return the source position of the frame depth levels above the caller."""
    frame = sys._getframe(depth + 1)
    return Location(file=frame.f_code.co_filename, line=frame.f_lineno)


@dataclass(frozen=True)
class DescriptionPath:
    """Immutable root-to-leaf chain of descriptions."""

    parts: tuple[str, ...] = ()

    def child(self, description: str) -> DescriptionPath:
        return DescriptionPath(self.parts + (description,))

    def __str__(self) -> str:
        return " ".join(self.parts)


@dataclass(eq=False)
class Case:
    """A single registered case. A missing body makes it a skip."""

    description: str
    context: Context = field(repr=False)
    sequence: int
    location: Location
    body: CaseBody | None = None

    @property
    def path(self) -> DescriptionPath:
        return self.context.path.child(self.description)

    @property
    def display_name(self) -> str:
        """Stable name derived from the sequence number, e.g. test_0001_foo."""
        slug = _NON_WORD.sub("_", self.description).lower()
        return f"test_{self.sequence:04d}_{slug}"


@dataclass(eq=False)
class Context:
    """A node in the registration tree."""

    description: str
    parent: Context | None = field(default=None, repr=False)
    path: DescriptionPath = field(default_factory=DescriptionPath)
    children: list[Context] = field(default_factory=list)
    cases: list[Case] = field(default_factory=list)

class CaseRegistry:
    """Builds the Context/Case tree for one run.

    Both operations are plain appends. Nothing is searched for by
    description, so two contexts (or cases) with the same text at the same
    nesting point are two distinct nodes.
    """

    def __init__(self) -> None:
        self.root = Context(description="")
        self._sequence = 0
        self._sealed = False

    def seal(self) -> None:
        """End the registration phase. Later registrations raise."""
        self._sealed = True

    def _check_sealed(self) -> None:
        if self._sealed:
            raise RuntimeError(
                "Cannot register into a sealed registry; build a new one per run"
            )

    def open_context(
        self, description: str, parent: Context | None = None
    ) -> Context:
        """Append a new child context.

        Args:
            description: Human-readable description of the context.
            parent: Owning context, or None for the run root.

        Returns:
            The newly created Context.
        """
        self._check_sealed()
        owner = parent if parent is not None else self.root
        context = Context(
            description=description,
            parent=owner,
            path=owner.path.child(description),
        )
        owner.children.append(context)
        return context

    def add_case(
        self,
        context: Context | None,
        description: str,
        body: CaseBody | None = None,
        location: Location | None = None,
    ) -> Case:
        """Append a case to a context.

        Args:
            context: Owning context, or None for the run root.
            description: Human-readable description of the case.
            body: Callable taking the assertion helper, or None for a skip.
            location: Registration site; defaults to the caller of add_case.

        Returns:
            The newly created Case.
        """
        self._check_sealed()
        owner = context if context is not None else self.root
        self._sequence += 1
        case = Case(
            description=description,
            context=owner,
            sequence=self._sequence,
            location=location or caller_location(1),
            body=body,
        )
        owner.cases.append(case)
        return case

