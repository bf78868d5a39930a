from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

LEVELS: dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class LoggingInterface(ABC):
    """Structured logging: a message plus keyword context.

    Context keys used across the bot: ``username``, ``command``, ``key``,
    ``endpoint``, ``currency_from``, ``currency_to``, ``error``.
    """

    @abstractmethod
    def log(self, level: str, msg: str, **ctx: Any) -> None:
        """Record *msg* at *level*, one of :data:`LEVELS`."""

    def debug(self, msg: str, **ctx: Any) -> None:
        self.log("DEBUG", msg, **ctx)

    def info(self, msg: str, **ctx: Any) -> None:
        self.log("INFO", msg, **ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self.log("WARN", msg, **ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self.log("ERROR", msg, **ctx)
