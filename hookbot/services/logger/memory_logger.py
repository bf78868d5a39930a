from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hookbot.services.logger.interface import LoggingInterface


@dataclass
class LogEntry:
    level: str
    msg: str
    ctx: dict[str, Any] = field(default_factory=dict)


class MemoryLogger(LoggingInterface):
    """Keeps every entry, at every level, for assertions in tests."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def log(self, level: str, msg: str, **ctx: Any) -> None:
        self.entries.append(LogEntry(level, msg, ctx))

    @property
    def messages(self) -> list[str]:
        return [e.msg for e in self.entries]

    def at(self, level: str) -> list[LogEntry]:
        return [e for e in self.entries if e.level == level]
