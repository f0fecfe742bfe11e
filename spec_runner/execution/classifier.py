"""Outcome classification for a single case.

Runs a case body inside its own failure boundary and turns whatever happened
into a Pass, Fail, Error or Skip. Backtraces are trimmed to the user's call
chain: frames of this module, of the assertion helper, of the standard
library and of installed packages never appear.
"""

from __future__ import annotations

import os
import sysconfig
import traceback
from types import TracebackType

from spec_runner.execution import assertions as _assertions_module
from spec_runner.execution.assertions import Assertions
from spec_runner.execution.outcome import Error, Fail, Frame, Outcome, Pass, Skip
from spec_runner.registration.tree import Case, Location

DEFAULT_FAIL_MESSAGE = "Failed assertion, no message given."

# Interpreter-level exits are not user errors and end the whole run.
PROPAGATED_EXCEPTIONS = (KeyboardInterrupt, SystemExit, GeneratorExit)


def _real(path: str) -> str:
    return os.path.normcase(os.path.realpath(path))


_INTERNAL_FILES = frozenset({_real(__file__), _real(_assertions_module.__file__)})

_LIBRARY_DIRS = tuple(sorted({
    _real(path) + os.sep
    for key, path in sysconfig.get_paths().items()
    if key in ("stdlib", "platstdlib", "purelib", "platlib")
}))


def _is_user_frame(filename: str) -> bool:
    if filename.startswith("<frozen "):
        return False
    path = _real(filename)
    if path in _INTERNAL_FILES:
        return False
    return not path.startswith(_LIBRARY_DIRS)


def trim_backtrace(tb: TracebackType | None) -> tuple[Frame, ...]:
    """Convert a traceback into user frames, innermost first.

    The outermost traceback entry is the classifier's own call into the body
    and is dropped. Frames from the assertion helper, the standard library
    and installed packages are dropped as well.

    Args:
        tb: Traceback of the exception caught around the body call.

    Returns:
        Tuple of Frame objects, innermost first.
    """
    if tb is None:
        return ()
    entries = traceback.extract_tb(tb.tb_next) if tb.tb_next else []
    frames = [
        Frame(file=entry.filename, line=entry.lineno or 0, name=entry.name)
        for entry in entries
        if _is_user_frame(entry.filename)
    ]
    frames.reverse()
    return tuple(frames)


def describe_exception(exc: BaseException) -> str:
    """Return str(exc), or a placeholder when its __str__ itself raises."""
    try:
        return str(exc)
    except Exception:
        return f"<unprintable {type(exc).__name__}>"


def classify(case: Case) -> Outcome:
    """Execute a case once and classify the result.

    Args:
        case: The case to run.

    Returns:
        Skip when the case has no body, Pass when the body returns, Fail for
        an AssertionError and Error for any other exception, except the
        interpreter-level exits in PROPAGATED_EXCEPTIONS which are re-raised.
    """
    if case.body is None:
        return Skip(location=case.location)

    helper = Assertions()
    try:
        case.body(helper)
    except PROPAGATED_EXCEPTIONS:
        raise
    except AssertionError as e:
        backtrace = trim_backtrace(e.__traceback__)
        return Fail(
            message=describe_exception(e) or DEFAULT_FAIL_MESSAGE,
            location=_raise_site(backtrace, case),
            assertions=helper.count,
        )
    except BaseException as e:
        backtrace = trim_backtrace(e.__traceback__)
        return Error(
            message=describe_exception(e),
            location=_raise_site(backtrace, case),
            backtrace=backtrace,
            exception_type=type(e).__name__,
            assertions=helper.count,
        )
    return Pass(assertions=helper.count)


def _raise_site(backtrace: tuple[Frame, ...], case: Case) -> Location:
    if not backtrace:
        return case.location
    return Location(file=backtrace[0].file, line=backtrace[0].line)
