"""Redis-backed key-value store using redis-py."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import redis

from hookbot.errors import StoreError
from hookbot.services.kv.interface import KeyValueStoreInterface
from hookbot.services.secrets.interface import SecretsInterface


class RedisStore(KeyValueStoreInterface):
    def __init__(self, secrets: SecretsInterface) -> None:
        self._url = secrets.get_or_default("CACHE_REDIS_URL", "redis://localhost:6379/0")
        self._client: redis.Redis | None = None  # type: ignore[type-arg]

    def connect(self) -> None:
        import redis

        self._client = redis.Redis.from_url(self._url, decode_responses=True)

    def disconnect(self) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def _ensure_connected(self) -> redis.Redis:  # type: ignore[type-arg]
        if self._client is None:
            self.connect()
        return self._client  # type: ignore[return-value]

    def get(self, key: str) -> str | None:
        import redis

        try:
            return self._ensure_connected().get(key)
        except redis.RedisError as exc:
            raise StoreError(f"redis GET {key} failed: {exc}") from exc

    def put(self, key: str, value: str) -> None:
        import redis

        try:
            self._ensure_connected().set(key, value)
        except redis.RedisError as exc:
            raise StoreError(f"redis SET {key} failed: {exc}") from exc

    def health_check(self) -> bool:
        try:
            return bool(self._ensure_connected().ping())
        except Exception:
            return False
