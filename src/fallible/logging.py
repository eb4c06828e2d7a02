"""Key/value event logging for open_file() and the demo CLI.

One process-wide sink, set by configure_logging() and shared by every thread.
The Result container never logs; producers such as open_file() do.

Quick Start:
    >>> from fallible.logging import configure_logging, get_logger
    >>> configure_logging(format="console", level="DEBUG")
    >>> get_logger("fallible.files").debug("file opened", path="file.txt")
    # => 10:30:45.120 [debug] file opened logger=fallible.files path=file.txt
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol, TextIO

if TYPE_CHECKING:
    from .config import FallibleSettings


class Sink(Protocol):
    """Writes one event. `fields` already holds the logger's bound context."""

    def emit(self, ts: float, level: str, event: str, fields: dict[str, Any]) -> None: ...


@dataclass(slots=True)
class ConsoleSink:
    """One line per event: HH:MM:SS.mmm [level] event key=value ..."""

    stream: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = follow stream.isatty()
    timestamps: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = bool(getattr(self.stream, "isatty", lambda: False)())

    def emit(self, ts: float, level: str, event: str, fields: dict[str, Any]) -> None:
        tag = f"[{level}]"
        if self.colors:
            tag = f"{_LEVEL_COLORS.get(level, '')}{tag}\033[0m"
        head = [datetime.fromtimestamp(ts, tz=UTC).strftime("%H:%M:%S.%f")[:-3]] if self.timestamps else []
        pairs = [f"{k}={v}" for k, v in sorted(fields.items())]
        print(" ".join([*head, tag, event, *pairs]), file=self.stream)


@dataclass(slots=True)
class JsonSink:
    """JSON Lines, one object per event."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def emit(self, ts: float, level: str, event: str, fields: dict[str, Any]) -> None:
        import orjson
        record = {"timestamp": datetime.fromtimestamp(ts, tz=UTC).isoformat(), "level": level, "event": event}
        print(orjson.dumps({**record, **fields}, default=str).decode(), file=self.stream)


class NullSink:
    """Drops everything."""

    def emit(self, ts: float, level: str, event: str, fields: dict[str, Any]) -> None:
        pass


_LEVEL_COLORS = {"debug": "\033[34m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}

# Process-wide state. Reads are plain attribute loads; writes go through the lock.
_lock = threading.Lock()
_sink: Sink | None = None
_threshold: int = logging.INFO


@dataclass(frozen=True, slots=True)
class EventLogger:
    """Named logger. Checks the shared threshold and sink at call time."""

    name: str | None = None

    def _emit(self, level: int, event: str, fields: dict[str, Any]) -> None:
        if level < _threshold:
            return
        if self.name:
            fields = {"logger": self.name, **fields}
        _current_sink().emit(time.time(), logging.getLevelName(level).lower(), event, fields)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit(logging.INFO, event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit(logging.WARNING, event, fields)


def configure_logging(
    format: str = "console",  # noqa: A002 - matches stdlib naming
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> Sink:
    """Set the process-wide sink and level. Format: "console", "json" or "none"."""
    global _sink, _threshold
    match format:
        case "console": sink: Sink = ConsoleSink(output or sys.stderr, colors)
        case "json": sink = JsonSink(output or sys.stdout)
        case "none": sink = NullSink()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    with _lock:
        _sink, _threshold = sink, getattr(logging, level.upper(), logging.INFO)
    return sink


def configure_from_settings(settings: FallibleSettings, *, output: TextIO | None = None) -> Sink:
    """configure_logging() driven by FallibleSettings; debug=True forces DEBUG."""
    return configure_logging(
        settings.logging.format,
        settings.effective_log_level,
        output=output,
        colors=settings.logging.colors,
    )


def get_logger(name: str | None = None) -> EventLogger:
    return EventLogger(name)


def _current_sink() -> Sink:
    global _sink
    if (sink := _sink) is None:
        with _lock:
            if (sink := _sink) is None:
                sink = _sink = ConsoleSink()
    return sink
