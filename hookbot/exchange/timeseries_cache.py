"""Permanent cache of historical rate windows.

A window is keyed by ``timeseries_cache:{start}_{end}_{from}_{to}`` and holds
the upstream ``rates`` mapping (``date -> {code -> rate}``) as JSON. Past rates
do not change, so entries never expire.
"""

from __future__ import annotations

import json
from typing import Any

from hookbot.errors import StoreError
from hookbot.services.kv.interface import KeyValueStoreInterface
from hookbot.services.logger.interface import LoggingInterface

TimeseriesMap = dict[str, dict[str, Any]]


class TimeseriesCache:
    def __init__(self, kv: KeyValueStoreInterface, log: LoggingInterface) -> None:
        self.kv = kv
        self.log = log

    @staticmethod
    def key(start: str, end: str, from_currency: str, to_currency: str) -> str:
        return f"timeseries_cache:{start}_{end}_{from_currency}_{to_currency}"

    def lookup(
        self, start: str, end: str, from_currency: str, to_currency: str
    ) -> TimeseriesMap | None:
        key = self.key(start, end, from_currency, to_currency)
        try:
            raw = self.kv.get(key)
        except StoreError as exc:
            self.log.warn("Timeseries cache read failed", key=key, error=str(exc))
            return None
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except ValueError:
            self.log.warn("Ignoring malformed timeseries cache entry", key=key)
            return None
        return data if isinstance(data, dict) and data else None

    def store(
        self, start: str, end: str, from_currency: str, to_currency: str, data: TimeseriesMap
    ) -> None:
        """Cache *data* for the window. Empty results are not cached."""
        if not data:
            return
        self.kv.put(self.key(start, end, from_currency, to_currency), json.dumps(data))
