"""Implementations selectable with ``--kv``, ``--http`` and ``--metrics``.

Entries are ``"module:Class"`` strings so that choosing ``--kv memory`` never
imports redis and ``--metrics noop`` never imports prometheus_client.
"""

from __future__ import annotations

import importlib
from typing import Any

REGISTRY: dict[str, dict[str, str]] = {
    "kv": {
        "memory": "hookbot.services.kv.memory_store:MemoryStore",
        "redis": "hookbot.services.kv.redis_store:RedisStore",
    },
    "http": {
        "aiohttp": "hookbot.services.http.aiohttp_client:AiohttpClient",
        "memory": "hookbot.services.http.memory_client:MemoryHttpClient",
    },
    "metrics": {
        "noop": "hookbot.services.metrics.noop_metrics:NoopMetrics",
        "memory": "hookbot.services.metrics.memory_metrics:MemoryMetrics",
        "prometheus": "hookbot.services.metrics.prometheus_metrics:PrometheusMetrics",
    },
}

INTERFACES: dict[str, str] = {
    "kv": "hookbot.services.kv.interface:KeyValueStoreInterface",
    "http": "hookbot.services.http.interface:HttpClientInterface",
    "metrics": "hookbot.services.metrics.interface:MetricsInterface",
}

DEFAULTS: dict[str, str] = {"kv": "memory", "http": "aiohttp", "metrics": "noop"}


def load(target: str) -> Any:
    module_name, _, attr = target.partition(":")
    return getattr(importlib.import_module(module_name), attr)


def resolve_implementation(flag_name: str, impl_name: str) -> type[Any]:
    """Return the class registered as *impl_name* for ``--<flag_name>``."""
    try:
        impls = REGISTRY[flag_name]
    except KeyError:
        raise ValueError(f"Unknown interface flag: --{flag_name}") from None
    if impl_name not in impls:
        raise ValueError(
            f"Unknown implementation '{impl_name}' for --{flag_name} "
            f"(available: {', '.join(impls)})"
        )
    cls = load(impls[impl_name])
    interface = load(INTERFACES[flag_name])
    if not issubclass(cls, interface):
        raise TypeError(f"{cls.__name__} does not implement {interface.__name__}")
    return cls
