"""TTL-gated cache of single exchange rates.

Entries live at ``cache:{from}_{to}`` as ``{"rate": float, "timestamp": int}``
JSON. Stale entries are left in place and simply overwritten by the next
successful fetch.
"""

from __future__ import annotations

import json
import time

from hookbot.errors import StoreError
from hookbot.services.kv.interface import KeyValueStoreInterface
from hookbot.services.logger.interface import LoggingInterface

RATE_TTL_SECONDS = 4 * 60 * 60


class RateCache:
    def __init__(self, kv: KeyValueStoreInterface, log: LoggingInterface) -> None:
        self.kv = kv
        self.log = log

    @staticmethod
    def key(from_currency: str, to_currency: str) -> str:
        return f"cache:{from_currency}_{to_currency}"

    def lookup(self, from_currency: str, to_currency: str) -> float | None:
        """Return the cached rate if younger than the TTL, else None."""
        key = self.key(from_currency, to_currency)
        try:
            raw = self.kv.get(key)
        except StoreError as exc:
            self.log.warn("Rate cache read failed", key=key, error=str(exc))
            return None
        if raw is None:
            return None

        try:
            entry = json.loads(raw)
            rate = float(entry["rate"])
            fetched_at = int(entry["timestamp"])
        except (ValueError, KeyError, TypeError):
            self.log.warn("Ignoring malformed rate cache entry", key=key)
            return None

        if int(time.time()) - fetched_at < RATE_TTL_SECONDS:
            return rate
        return None

    def store(self, from_currency: str, to_currency: str, rate: float) -> None:
        entry = {"rate": rate, "timestamp": int(time.time())}
        self.kv.put(self.key(from_currency, to_currency), json.dumps(entry))
