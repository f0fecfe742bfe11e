"""Counting assertion helper handed to every case body.

Each check increments the counter before it is evaluated, so a check that
fails still counts as performed.
"""

from __future__ import annotations

from typing import Any, Callable


class AssertionFailure(AssertionError):
    """A classified assertion failure raised by a failed check."""


class Assertions:
    def __init__(self) -> None:
        self.count = 0

    def assert_(self, test: Any, msg: str | None = None) -> None:
        self.count += 1
        if not test:
            raise AssertionFailure(msg or f"Expected {test!r} to be truthy.")

    def refute(self, test: Any, msg: str | None = None) -> None:
        self.count += 1
        if test:
            raise AssertionFailure(msg or f"Expected {test!r} to not be truthy.")

    def assert_equal(self, expected: Any, actual: Any, msg: str | None = None) -> None:
        self.count += 1
        if expected != actual:
            raise AssertionFailure(msg or f"Expected {expected!r}, not {actual!r}.")

    def assert_raises(
        self,
        exc_type: type[BaseException],
        func: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> BaseException:
        """Call func and check that it raises exc_type.

        Returns:
            The caught exception.
        """
        self.count += 1
        try:
            func(*args, **kwargs)
        except exc_type as e:
            return e
        raise AssertionFailure(f"Expected {exc_type.__name__} to be raised.")

    def flunk(self, msg: str | None = None) -> None:
        self.count += 1
        raise AssertionFailure(msg or "Epic Fail!")

    def pass_(self) -> None:
        self.count += 1
