from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class HttpClientInterface(ABC):
    """Outbound JSON-over-HTTP GET used for the exchange-rate API."""

    @abstractmethod
    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        """GET *url* and return the decoded JSON body.

        Raises ``HttpError`` on transport failure, a non-2xx status, or a body
        that is not JSON.
        """
        ...

    async def close(self) -> None:
        """Release pooled connections. Override as needed."""
