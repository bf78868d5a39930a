"""aiohttp-backed HTTP client with one pooled session per process."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from hookbot.errors import HttpError
from hookbot.services.http.interface import HttpClientInterface
from hookbot.services.secrets.interface import SecretsInterface


class AiohttpClient(HttpClientInterface):
    """Config (via secrets):
        XE_HTTP_TIMEOUT - total request timeout in seconds (default: 10).
    """

    def __init__(self, secrets: SecretsInterface) -> None:
        self._timeout = aiohttp.ClientTimeout(
            total=float(secrets.get_or_default("XE_HTTP_TIMEOUT", "10"))
        )
        self._session: aiohttp.ClientSession | None = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def get(self, url: str, headers: dict[str, str] | None = None) -> Any:
        session = self._ensure_session()
        try:
            async with session.get(url, headers=headers) as resp:
                if resp.status >= 300:
                    body = await resp.text()
                    raise HttpError(
                        f"GET {resp.url.path} returned {resp.status}: {body[:200]}",
                        status=resp.status,
                    )
                return await resp.json(content_type=None)
        except aiohttp.ClientError as exc:
            raise HttpError(f"GET {url.split('?')[0]} failed: {exc}") from exc
        except ValueError as exc:
            raise HttpError(f"GET {url.split('?')[0]} returned invalid JSON") from exc
        except asyncio.TimeoutError as exc:
            raise HttpError(f"GET {url.split('?')[0]} timed out") from exc

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None
