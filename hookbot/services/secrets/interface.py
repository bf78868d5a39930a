from __future__ import annotations

from abc import ABC, abstractmethod

from hookbot.errors import HookbotError


class MissingSecretError(HookbotError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Required secret '{key}' is not set")
        self.key = key

    def __str__(self) -> str:
        return self.args[0]


class SecretsInterface(ABC):
    """Source of API tokens and deployment settings.

    A blank value counts as unset everywhere.
    """

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    def get_or_default(self, key: str, default: str) -> str:
        return self.get(key) or default

    def require(self, key: str) -> str:
        value = self.get(key)
        if not value:
            raise MissingSecretError(key)
        return value
