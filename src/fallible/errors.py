"""Exceptions raised by fallible.

Errors stored inside a Result are opaque payloads and are never classified.
The classes here cover the two ways the container itself can fail loudly
(unwrapping a failure, building a failure without an error) and the error
produced by the file-opening helper.
"""

from __future__ import annotations

from typing import Any


class FallibleError(Exception):
    """Base class for all fallible exceptions."""


class UnwrapError(FallibleError, RuntimeError):
    """Raised by unwrap()/expect() on a failure.

    Not meant to be caught in normal control flow. Reaching it means the caller
    opted into crash-on-failure and the failure happened.

    Attributes:
        error: The error stored in the failed Result.
    """

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message)
        self.error = error


class InvalidFailureError(FallibleError, TypeError):
    """Raised when Failure() is called without an actual error."""


class CannotOpenFileError(FallibleError, OSError):
    """A file could not be opened. The underlying OSError is the __cause__."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot open file: {path}: {reason}")
        self.path = path
        self.reason = reason

    def __reduce__(self) -> tuple[type[CannotOpenFileError], tuple[str, str]]:
        return (type(self), (self.path, self.reason))
