"""Classified outcomes of a single case execution.

Four variants: Pass, Fail (assertion signalled non-success), Error (any
other exception escaped the body) and Skip (the case has no body).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from spec_runner.registration.tree import Location

PASS = "pass"
FAIL = "fail"
ERROR = "error"
SKIP = "skip"


@dataclass(frozen=True)
class Frame:
    """One backtrace entry."""

    file: str
    line: int
    name: str

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:in '{self.name}'"


@dataclass(frozen=True)
class Pass:
    assertions: int = 0

    kind = PASS


@dataclass(frozen=True)
class Fail:
    message: str
    location: Location
    assertions: int = 0

    kind = FAIL


@dataclass(frozen=True)
class Error:
    message: str
    location: Location
    backtrace: tuple[Frame, ...] = ()
    exception_type: str = "Exception"
    assertions: int = 0

    kind = ERROR


@dataclass(frozen=True)
class Skip:
    location: Location
    assertions: int = 0

    kind = SKIP


Outcome = Union[Pass, Fail, Error, Skip]
