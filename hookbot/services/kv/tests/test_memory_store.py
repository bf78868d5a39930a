import pytest

from hookbot.errors import StoreError
from hookbot.services.kv.memory_store import MemoryStore


def test_get_put_roundtrip():
    store = MemoryStore()
    store.put("key", "value")
    assert store.get("key") == "value"


def test_get_returns_none_for_missing():
    store = MemoryStore()
    assert store.get("nonexistent") is None


def test_put_overwrites():
    store = MemoryStore({"key": "old"})
    store.put("key", "new")
    assert store.get("key") == "new"


def test_fail_reads_raises_store_error():
    store = MemoryStore({"key": "value"})
    store.fail_reads = True
    with pytest.raises(StoreError):
        store.get("key")
    assert store.health_check() is False


def test_fail_writes_for_selected_keys():
    store = MemoryStore()
    store.fail_writes = {"b"}
    store.put("a", "1")
    with pytest.raises(StoreError, match="'b'"):
        store.put("b", "2")
    assert store.keys == ["a"]


def test_fail_all_writes():
    store = MemoryStore()
    store.fail_writes = True
    with pytest.raises(StoreError):
        store.put("a", "1")
