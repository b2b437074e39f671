"""Event-style logging used by the engine and the command-line tool."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO

from .exceptions import ConfigError

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Anything that accepts an event name plus keyword fields."""

    def debug(self, event: str, **fields: Any) -> None:
        ...

    def info(self, event: str, **fields: Any) -> None:
        ...

    def warning(self, event: str, **fields: Any) -> None:
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


def _plain(value: Any) -> str:
    if isinstance(value, float) and value == float("inf"):
        return "inf"
    return str(value)


class StdLogger:
    """Writes one line per event, either ``level event k=v`` or JSON."""

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ConfigError(f"unknown log level {level!r}; expected one of {sorted(LEVELS)}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            obj: Dict[str, Any] = {"level": level, "event": event}
            obj.update(fields)
            self.stream.write(json.dumps(obj, default=str) + "\n")
        else:
            kv = " ".join(f"{k}={_plain(v)}" for k, v in fields.items())
            self.stream.write(f"{level} {event} {kv}".rstrip() + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)
