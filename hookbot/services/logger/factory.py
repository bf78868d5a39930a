from __future__ import annotations

from hookbot.services.logger.interface import LoggingInterface
from hookbot.services.logger.memory_logger import MemoryLogger
from hookbot.services.logger.pretty_logger import PrettyLogger


class LoggerFactory:
    """Builds the process logger selected by ``--log`` or ``LOG_IMPL``.

    The instance is created on first use and shared afterwards, so every
    component of one process writes through the same logger.
    """

    IMPLEMENTATIONS = ("pretty", "memory")

    def __init__(self, impl: str = "pretty", level: str = "INFO") -> None:
        if impl not in self.IMPLEMENTATIONS:
            raise ValueError(
                f"Unknown logger implementation: '{impl}' "
                f"(available: {', '.join(self.IMPLEMENTATIONS)})"
            )
        self.impl = impl
        self.level = level
        self._logger: LoggingInterface | None = None

    def create(self) -> LoggingInterface:
        if self._logger is None:
            if self.impl == "memory":
                self._logger = MemoryLogger()
            else:
                self._logger = PrettyLogger(level=self.level)
        return self._logger
