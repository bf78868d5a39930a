from __future__ import annotations

from hookbot.errors import StoreError
from hookbot.services.kv.interface import KeyValueStoreInterface


class MemoryStore(KeyValueStoreInterface):
    """In-process key-value store for unit tests and local runs.

    ``fail_reads`` / ``fail_writes`` make the store raise ``StoreError`` so
    callers' failure paths can be exercised.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})
        self.fail_reads = False
        self.fail_writes: set[str] | bool = False

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StoreError(f"read failed for '{key}'")
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        if self.fail_writes is True or (
            isinstance(self.fail_writes, set) and key in self.fail_writes
        ):
            raise StoreError(f"write failed for '{key}'")
        self._data[key] = value

    def health_check(self) -> bool:
        return not self.fail_reads

    @property
    def keys(self) -> list[str]:
        """Convenience: return the stored keys in insertion order."""
        return list(self._data)
