from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from hookbot.services.logger.interface import LEVELS, LoggingInterface

_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARN": "\033[33m",
    "ERROR": "\033[31m",
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """Colorized one-line-per-entry logger writing to stderr.

    Entries below *level* are dropped; an unrecognised level means ``INFO``.
    Context is appended as ``key=value`` pairs.
    """

    def __init__(self, level: str = "INFO", stream: TextIO | None = None) -> None:
        self._threshold = LEVELS.get(level.upper(), LEVELS["INFO"])
        self._stream = stream

    def log(self, level: str, msg: str, **ctx: Any) -> None:
        if LEVELS.get(level, LEVELS["INFO"]) < self._threshold:
            return
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        pairs = "".join(f" {k}={v}" for k, v in ctx.items())
        line = f"{_COLORS.get(level, '')}{ts} {level:<5}{_RESET} {msg}{pairs}"
        print(line, file=self._stream or sys.stderr)
