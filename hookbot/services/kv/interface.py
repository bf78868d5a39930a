from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStoreInterface(ABC):
    """Text key-value store shared by every request.

    Implementations raise ``StoreError`` when the backend fails; a missing key
    is not an error and reads as ``None``.
    """

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def put(self, key: str, value: str) -> None: ...

    @abstractmethod
    def health_check(self) -> bool: ...
