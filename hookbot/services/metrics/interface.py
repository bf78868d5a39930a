from __future__ import annotations

import time
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator


class MetricsInterface(ABC):
    """Counters, gauges and histograms for the bot's cache and upstream traffic.

    *tags* become labels; implementations must accept the same tag keys on
    every call for a given name.
    """

    @abstractmethod
    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None: ...

    @abstractmethod
    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None: ...

    @abstractmethod
    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None: ...

    @contextmanager
    def timed(self, name: str, tags: dict[str, str] | None = None) -> Iterator[None]:
        """Record the block's wall time in seconds as a histogram sample, even if it raises."""
        started = time.monotonic()
        try:
            yield
        finally:
            self.histogram(name, time.monotonic() - started, tags=tags)
