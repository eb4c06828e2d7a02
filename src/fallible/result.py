"""Result container for the outcome of a fallible operation.

A Result is exactly one of two variants, fixed at construction:
- Success: holds a valid value and no error
- Failure: holds an error; the value is unset (None) and must not be relied on

Extraction comes in two flavors, chosen by the caller:
- Unchecked: unwrap, expect (raise UnwrapError on failure)
- Safe: unwrap_or, unwrap_or_err (always return normally)
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, TypeVar, cast

from .errors import InvalidFailureError, UnwrapError

# Type variables for generic Result
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
F = TypeVar("F")  # Substitute error type

UNWRAP_MARKER = "called unwrap on failure"

# Only Success() and Failure() hold this.
_CONSTRUCT = object()


class Result(Generic[T, E]):
    """Discriminated union representing success or failure.

    Build instances only through Success() or Failure(); calling Result()
    directly raises TypeError. The discriminant is the error slot: no error
    means success.

    Examples:
        >>> Success(42).unwrap()
        42
        >>> Failure(OSError("disk full")).unwrap_or(0)
        0
        >>> Failure(OSError("disk full")).unwrap_or_err(RuntimeError("fatal"))
        (None, RuntimeError('fatal'))

    Notes:
        - Frozen: no method mutates an instance
        - The value is not owned: a wrapped file handle is still the caller's to close
        - Safe to read from multiple threads (no internal state changes)
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: T | None, error: E | None, key: object, /) -> None:
        """Private constructor. Use Success() or Failure() instead.

        Raises:
            TypeError: If called directly.
        """
        if key is not _CONSTRUCT:
            raise TypeError("Result cannot be constructed directly; use Success() or Failure()")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_error", error)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        """True iff no error is present."""
        return self._error is None

    def is_failure(self) -> bool:
        """True iff an error is present. Always the negation of is_success()."""
        return self._error is not None

    def error_value(self) -> E | None:
        """Stored error, or None for a success."""
        return self._error

    # ─────────────────────────────────────────────────────────────────
    # Unchecked Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the value, raise on failure.

        Raises:
            UnwrapError: If Result is a failure. The message is prefixed with
                "called unwrap on failure" and ends with the error text.
        """
        if self._error is None:
            return cast(T, self._value)
        self._fail(f"{UNWRAP_MARKER}: {self._error}")

    def expect(self, msg: str) -> T:
        """Extract the value with a custom failure message.

        Raises:
            UnwrapError: If Result is a failure, with message "<msg>: <error>".
        """
        if self._error is None:
            return cast(T, self._value)
        self._fail(f"{msg}: {self._error}")

    def _fail(self, message: str) -> NoReturn:
        cause = self._error if isinstance(self._error, BaseException) else None
        raise UnwrapError(message, self._error) from cause

    # ─────────────────────────────────────────────────────────────────
    # Safe Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap_or(self, default: T) -> T:
        """Extract the value or return default unchanged."""
        return cast(T, self._value) if self._error is None else default

    def unwrap_or_err(self, new_err: F) -> tuple[T | None, F | None]:
        """Convert back to an explicit (value, error) pair.

        Returns (value, None) on success and (None, new_err) on failure. The
        original error is discarded; read error_value() first if it matters.
        """
        if self._error is None:
            return cast(T, self._value), None
        return None, new_err

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Truthiness mirrors is_success()."""
        return self._error is None

    def __repr__(self) -> str:
        if self._error is None:
            return f"Success({self._value!r})"
        return f"Failure({self._error!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality. Failure values are ignored."""
        if not isinstance(other, Result):
            return NotImplemented
        if self._error is None:
            return other._error is None and self._value == other._value
        return self._error == other._error

    def __hash__(self) -> int:
        if self._error is None:
            return hash((True, self._value))
        return hash((False, self._error))

    def __reduce__(self) -> tuple[Any, tuple[Any]]:
        # copy/pickle rebuild through the public constructors.
        if self._error is None:
            return (Success, (self._value,))
        return (Failure, (self._error,))


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Result[T, Any]:  # noqa: N802
    """Construct the success variant. No validation of value is done."""
    return Result(value, None, _CONSTRUCT)


def Failure(error: E) -> Result[Any, E]:  # noqa: N802
    """Construct the failure variant.

    Raises:
        InvalidFailureError: If error is None. A failure must carry an error,
            otherwise is_failure() and error_value() would disagree.
    """
    if error is None:
        raise InvalidFailureError("Failure() requires an error, got None")
    return Result(None, error, _CONSTRUCT)
