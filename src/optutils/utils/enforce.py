"""
Precondition checks used at component boundaries.

Both helpers report the location of their caller, so a failed check points at
the code that made the bad call rather than at this module.
"""

import inspect
from typing import Optional, Tuple, TypeVar

from ..exceptions import PreconditionError

T = TypeVar("T")


def _caller_location(depth: int) -> Tuple[Optional[str], Optional[int]]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                return None, None
            frame = frame.f_back
        if frame is None:
            return None, None
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


def check_invariant(condition: object, message: str = "") -> None:
    """
    Raise PreconditionError if condition is falsy.

    Args:
        condition: Value tested for truthiness
        message: Description included in the error

    Raises:
        PreconditionError: Carrying message and the caller's file and line
    """
    if not condition:
        filename, lineno = _caller_location(1)
        raise PreconditionError(message, filename, lineno)


def enforce(value: T, message: str = "") -> T:
    """Return value unchanged if truthy, otherwise raise PreconditionError."""
    if not value:
        filename, lineno = _caller_location(1)
        raise PreconditionError(message or f"Enforcement failed for value {value!r}", filename, lineno)
    return value
