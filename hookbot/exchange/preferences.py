"""Per-user defaults for the ``xe`` command, persisted in the key-value store.

Keys::

    {username}:currency_from
    {username}:currency_to
    {username}:currency_precision
"""

from __future__ import annotations

from hookbot.errors import StoreError
from hookbot.exchange.currencies import DEFAULT_FROM, DEFAULT_PRECISION, DEFAULT_TO
from hookbot.services.kv.interface import KeyValueStoreInterface
from hookbot.services.logger.interface import LoggingInterface


def parse_precision(raw: str | None) -> int | None:
    """Parse a non-negative integer, or return None."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


class PreferenceStore:
    def __init__(self, kv: KeyValueStoreInterface, log: LoggingInterface) -> None:
        self.kv = kv
        self.log = log

    def get_default_from(self, username: str) -> str:
        return self._read(f"{username}:currency_from") or DEFAULT_FROM

    def get_default_to(self, username: str) -> str:
        return self._read(f"{username}:currency_to") or DEFAULT_TO

    def get_default_precision(self, username: str) -> int:
        precision = parse_precision(self._read(f"{username}:currency_precision"))
        return DEFAULT_PRECISION if precision is None else precision

    def set_defaults(
        self, username: str, from_currency: str, to_currency: str, precision: int
    ) -> None:
        """Write the three preference keys one after another.

        Not atomic: if a later write fails the earlier ones stay applied.
        """
        self.kv.put(f"{username}:currency_to", to_currency)
        self.kv.put(f"{username}:currency_from", from_currency)
        self.kv.put(f"{username}:currency_precision", str(precision))
        self.log.info(
            "Saved exchange defaults",
            username=username,
            currency_from=from_currency,
            currency_to=to_currency,
            precision=precision,
        )

    def _read(self, key: str) -> str | None:
        try:
            return self.kv.get(key)
        except StoreError as exc:
            self.log.warn("Preference read failed, using default", key=key, error=str(exc))
            return None
