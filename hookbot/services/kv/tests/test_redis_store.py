from unittest.mock import MagicMock

import pytest
import redis

from hookbot.errors import StoreError
from hookbot.services.kv.redis_store import RedisStore
from hookbot.services.secrets.env_secrets import EnvSecrets


def _store(client: MagicMock) -> RedisStore:
    store = RedisStore(EnvSecrets(overrides={"CACHE_REDIS_URL": "redis://example:6379/1"}))
    store._client = client
    return store


def test_url_read_from_secrets():
    store = RedisStore(EnvSecrets(overrides={"CACHE_REDIS_URL": "redis://example:6379/1"}))
    assert store._url == "redis://example:6379/1"


def test_get_and_put_delegate_to_client():
    client = MagicMock()
    client.get.return_value = "USD"
    store = _store(client)
    assert store.get("alice:currency_from") == "USD"
    store.put("alice:currency_to", "JPY")
    client.set.assert_called_once_with("alice:currency_to", "JPY")


def test_redis_errors_become_store_errors():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("down")
    client.set.side_effect = redis.ConnectionError("down")
    store = _store(client)
    with pytest.raises(StoreError):
        store.get("k")
    with pytest.raises(StoreError):
        store.put("k", "v")


def test_health_check_false_when_ping_fails():
    client = MagicMock()
    client.ping.side_effect = redis.ConnectionError("down")
    assert _store(client).health_check() is False
