from __future__ import annotations

import os

from hookbot.services.secrets.interface import MissingSecretError, SecretsInterface

__all__ = ["EnvSecrets", "MissingSecretError"]


class EnvSecrets(SecretsInterface):
    """Snapshot of the process environment taken at construction.

    *overrides* come from ``--env`` / ``--env-file`` and win over the
    environment.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._values = {**os.environ, **(overrides or {})}

    def get(self, key: str) -> str | None:
        return self._values.get(key)
