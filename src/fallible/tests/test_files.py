"""Tests for open_file, the Result-producing file helper."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from fallible import CannotOpenFileError, UnwrapError, open_file
from fallible.logging import configure_logging


def test_open_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello", encoding="utf-8")

    res = open_file(path, encoding="utf-8")

    assert res.is_success()
    assert res.error_value() is None
    with res.unwrap() as fh:
        assert fh.read() == "hello"
        assert fh.name == str(path)


def test_handle_is_left_open_for_caller(tmp_path: Path) -> None:
    """The Result does not close the handle it carries."""
    path = tmp_path / "file.txt"
    path.write_bytes(b"data")

    res = open_file(path, "rb")
    fh = res.unwrap()
    del res

    assert not fh.closed
    fh.close()


def test_open_missing_file(tmp_path: Path) -> None:
    path = tmp_path / "unknown.txt"

    res = open_file(path)

    assert res.is_failure()
    err = res.error_value()
    assert isinstance(err, CannotOpenFileError)
    assert isinstance(err, OSError)
    assert err.path == str(path)
    assert str(err).startswith("cannot open file: ")
    assert isinstance(err.__cause__, FileNotFoundError)


def test_unwrap_missing_file_raises_with_file_error_text(tmp_path: Path) -> None:
    res = open_file(tmp_path / "unknown.txt")

    with pytest.raises(UnwrapError, match="cannot open file") as exc_info:
        res.unwrap()

    assert exc_info.value.__cause__ is res.error_value()


def test_safe_paths_on_missing_file(tmp_path: Path) -> None:
    res = open_file(tmp_path / "unknown.txt")
    substitute = RuntimeError("fatal: cannot read unknown.txt")

    assert res.unwrap_or(None) is None
    assert res.unwrap_or_err(substitute) == (None, substitute)


def test_directory_is_a_failure(tmp_path: Path) -> None:
    res = open_file(tmp_path)

    assert res.is_failure()
    assert isinstance(res.error_value(), CannotOpenFileError)


def test_failure_is_logged(tmp_path: Path) -> None:
    out = io.StringIO()
    configure_logging("console", "DEBUG", output=out, colors=False)

    open_file(tmp_path / "unknown.txt")

    line = out.getvalue()
    assert "[warning] file open failed" in line
    assert "unknown.txt" in line


def test_success_is_logged_at_debug_only(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("x", encoding="utf-8")
    out = io.StringIO()

    configure_logging("console", "INFO", output=out, colors=False)
    open_file(path).unwrap().close()
    assert out.getvalue() == ""

    configure_logging("console", "DEBUG", output=out, colors=False)
    open_file(path).unwrap().close()
    assert "[debug] file opened" in out.getvalue()


def test_path_with_nul_byte_is_a_failure() -> None:
    """Paths the OS cannot represent fail like any other open error."""
    res = open_file("bad\0name.txt")

    assert res.is_failure()
    err = res.error_value()
    assert isinstance(err, CannotOpenFileError)
    assert "embedded null byte" in str(err)
    assert isinstance(err.__cause__, ValueError)
