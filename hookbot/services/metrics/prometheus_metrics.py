"""Prometheus metrics implementation using prometheus_client."""

from __future__ import annotations

from hookbot.services.metrics.interface import MetricsInterface
from hookbot.services.secrets.interface import SecretsInterface

_PREFIX = "hookbot_"


class PrometheusMetrics(MetricsInterface):
    """Exposes the bot's metrics on a Prometheus scrape endpoint.

    Config (via secrets):
        METRICS_PROMETHEUS_PORT - Port to expose /metrics on (default: 9091).
                                  Set to 0 to skip starting the HTTP server.

    Names are prefixed with ``hookbot_`` and dots/dashes become underscores.
    A metric's label set is fixed by the first call that records it.
    """

    def __init__(self, secrets: SecretsInterface) -> None:
        import prometheus_client as prom

        self._prom = prom
        self._metrics: dict[str, object] = {}

        port = int(secrets.get_or_default("METRICS_PROMETHEUS_PORT", "9091"))
        if port:
            prom.start_http_server(port)

    @staticmethod
    def _sanitize(name: str) -> str:
        return _PREFIX + name.replace("-", "_").replace(".", "_")

    def _get(self, kind: type, name: str, tags: dict[str, str] | None):
        safe = self._sanitize(name)
        label_names = sorted(tags) if tags else []
        metric = self._metrics.get(safe)
        if metric is None:
            metric = kind(safe, safe, label_names)
            self._metrics[safe] = metric
        if label_names:
            return metric.labels(*[tags[n] for n in label_names])  # type: ignore[attr-defined,index]
        return metric

    def counter(self, name: str, value: float = 1, tags: dict[str, str] | None = None) -> None:
        self._get(self._prom.Counter, name, tags).inc(value)

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._get(self._prom.Gauge, name, tags).set(value)

    def histogram(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self._get(self._prom.Histogram, name, tags).observe(value)
