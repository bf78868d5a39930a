from __future__ import annotations

from hookbot.services.metrics.interface import MetricsInterface


class NoopMetrics(MetricsInterface):
    """Used when ``--metrics`` is not given: every sample is dropped."""

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        return None

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        return None

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        return None
