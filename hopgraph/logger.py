"""Structured event logging for the algorithms and the command-line tool.

The algorithms only need :class:`Logger` (``info`` and ``debug``). The CLI
uses :class:`StdLogger`, which adds ``warning`` and ``error`` and can carry
context fields bound once per run.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Protocol, TextIO

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


class Logger(Protocol):
    """What the shortest-path routines call while they run."""

    def info(self, event: str, **fields: Any) -> None:
        ...

    def debug(self, event: str, **fields: Any) -> None:
        ...


class NoopLogger:
    """Logger that discards all events."""

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


def _render(value: Any) -> str:
    text = str(value)
    if not text or any(c.isspace() for c in text) or "=" in text:
        return repr(text)
    return text


class StdLogger:
    """Write one event per line to a stream, as ``key=value`` text or JSON.

    Args:
        level: Minimum level to emit, one of ``LEVELS``.
        json_fmt: Emit one JSON object per line instead of plain text.
        stream: Output stream, ``sys.stderr`` by default.
        context: Fields attached to every event, placed before the event's
            own fields.

    Raises:
        ValueError: If ``level`` is not a known level.
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Optional[TextIO] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level {level!r} (expected one of {', '.join(LEVELS)})")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream if stream is not None else sys.stderr
        self.context: Dict[str, Any] = dict(context or {})

    def bind(self, **fields: Any) -> "StdLogger":
        """Return a logger sharing this one's settings with extra context."""
        return StdLogger(self.level, self.json_fmt, self.stream, {**self.context, **fields})

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        if not self.enabled(level):
            return
        record = {**self.context, **fields}
        if self.json_fmt:
            line = json.dumps({"level": level, "event": event, **record}, default=str)
        else:
            parts = [level, event] + [f"{k}={_render(v)}" for k, v in record.items()]
            line = " ".join(parts)
        self.stream.write(line + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self.log("error", event, **fields)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger"]
