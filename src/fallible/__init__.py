"""fallible - a two-state Result container for fallible operations.

A Result is either a Success holding a value or a Failure holding an error.
Callers decide how to react to failure:

- Safe: is_failure(), error_value(), unwrap_or(), unwrap_or_err()
- Unchecked: unwrap(), expect() raise UnwrapError on failure

Example:
    >>> from fallible import Failure, Success
    >>> Success(42).unwrap()
    42
    >>> Failure(OSError("disk full")).unwrap_or(0)
    0
    >>> Failure(OSError("disk full")).expect("cannot proceed")
    Traceback (most recent call last):
    ...
    fallible.errors.UnwrapError: cannot proceed: disk full
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import CannotOpenFileError, FallibleError, InvalidFailureError, UnwrapError
from .files import open_file
from .result import UNWRAP_MARKER, Failure, Result, Success

__all__ = [
    # Core type
    "Result",
    "Success",
    "Failure",
    "UNWRAP_MARKER",
    # Errors
    "FallibleError",
    "UnwrapError",
    "InvalidFailureError",
    "CannotOpenFileError",
    # Producers
    "open_file",
]
