from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hookbot.errors import HttpError
from hookbot.services.http.interface import HttpClientInterface


@dataclass
class RecordedRequest:
    url: str
    headers: dict[str, str]


class MemoryHttpClient(HttpClientInterface):
    """Serves canned JSON bodies and records every request, for unit tests.

    Responses are matched on the exact URL first, then on the longest
    registered prefix. Unmatched URLs fail with a 404 ``HttpError``.
    """

    def __init__(self) -> None:
        self._routes: dict[str, Any] = {}
        self.requests: list[RecordedRequest] = []
        self.error: HttpError | None = None

    def add(self, url: str, body: Any) -> None:
        self._routes[url] = body

    def fail_with(self, error: HttpError) -> None:
        self.error = error

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        self.requests.append(RecordedRequest(url, dict(headers or {})))
        if self.error is not None:
            raise self.error
        if url in self._routes:
            return self._routes[url]
        prefixes = sorted((p for p in self._routes if url.startswith(p)), key=len)
        if prefixes:
            return self._routes[prefixes[-1]]
        raise HttpError(f"GET {url} returned 404", status=404)
