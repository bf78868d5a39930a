"""Root-level pytest fixtures: in-memory services wired the way the runner wires them."""

from __future__ import annotations

import pytest

from hookbot.services.bundle import BotServices
from hookbot.services.http.memory_client import MemoryHttpClient
from hookbot.services.kv.memory_store import MemoryStore
from hookbot.services.logger.memory_logger import MemoryLogger
from hookbot.services.metrics.memory_metrics import MemoryMetrics
from hookbot.services.secrets.env_secrets import EnvSecrets


@pytest.fixture
def api() -> str:
    """Base URL of the fake exchange-rate API."""
    return "https://api.test/fixer"


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def http() -> MemoryHttpClient:
    return MemoryHttpClient()


@pytest.fixture
def secrets(api: str) -> EnvSecrets:
    return EnvSecrets(overrides={"CURR_CONV_TOKEN": "test-token", "XE_API_BASE_URL": api})


@pytest.fixture
def log() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def metrics() -> MemoryMetrics:
    return MemoryMetrics()


@pytest.fixture
def services(
    store: MemoryStore,
    http: MemoryHttpClient,
    secrets: EnvSecrets,
    log: MemoryLogger,
    metrics: MemoryMetrics,
) -> BotServices:
    return BotServices(kv=store, http=http, secrets=secrets, log=log, metrics=metrics)
