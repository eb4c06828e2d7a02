"""File-opening helper that reports its outcome as a Result.

The returned handle belongs to the caller. Close it (or use it as a context
manager); the Result does not manage its lifetime.

Example:
    >>> res = open_file("file.txt")
    >>> if res.is_success():
    ...     with res.unwrap() as fh:
    ...         data = fh.read()
"""

from __future__ import annotations

import os
from typing import IO, Any

from .errors import CannotOpenFileError
from .logging import get_logger
from .result import Failure, Result, Success

_log = get_logger("fallible.files")


def open_file(
    path: str | os.PathLike[str],
    mode: str = "r",
    *,
    encoding: str | None = None,
) -> Result[IO[Any], CannotOpenFileError]:
    """Open path, wrapping the handle in Success or the open error in Failure.

    The failure carries a CannotOpenFileError whose __cause__ is the original
    OSError, or the ValueError raised for an unusable path (embedded NUL byte).
    """
    name = os.fspath(path)
    try:
        fh = open(name, mode, encoding=encoding)  # noqa: SIM115 - caller owns the handle
    except (OSError, ValueError) as exc:
        err = CannotOpenFileError(name, getattr(exc, "strerror", None) or str(exc))
        err.__cause__ = exc
        _log.warning("file open failed", path=name, error=str(exc))
        return Failure(err)
    _log.debug("file opened", path=name, mode=mode)
    return Success(fh)
