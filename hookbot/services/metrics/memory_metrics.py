from __future__ import annotations

from hookbot.services.metrics.interface import MetricsInterface


def _series(name: str, tags: dict[str, str] | None) -> str:
    if not tags:
        return name
    labels = ",".join(f"{k}={tags[k]}" for k in sorted(tags))
    return f"{name}{{{labels}}}"


class MemoryMetrics(MetricsInterface):
    """In-memory metrics for test assertions.

    Values are stored under the bare name and, when tags are given, also under
    ``name{k=v,...}``.
    """

    def __init__(self) -> None:
        self.counters: dict[str, float] = {}
        self.gauges: dict[str, float] = {}
        self.histograms: dict[str, list[float]] = {}

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        for key in {name, _series(name, tags)}:
            self.counters[key] = self.counters.get(key, 0) + value

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        for key in {name, _series(name, tags)}:
            self.gauges[key] = value

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        for key in {name, _series(name, tags)}:
            self.histograms.setdefault(key, []).append(value)
