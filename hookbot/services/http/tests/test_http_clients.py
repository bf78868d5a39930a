"""Tests for the aiohttp client against a local aiohttp server, and the memory client."""

from __future__ import annotations

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from hookbot.errors import HttpError
from hookbot.services.http.aiohttp_client import AiohttpClient
from hookbot.services.http.memory_client import MemoryHttpClient
from hookbot.services.secrets.env_secrets import EnvSecrets


# ── Helpers ───────────────────────────────────────────────────────────────────

async def _latest(request: web.Request) -> web.Response:
    if request.headers.get("apiKey") != "secret":
        return web.json_response({"message": "No API key found"}, status=401)
    return web.json_response({"success": True, "rates": {request.query["symbols"]: 1.5}})


async def _garbage(request: web.Request) -> web.Response:
    return web.Response(text="<html>not json</html>", content_type="text/html")


@pytest.fixture
async def server():
    app = web.Application()
    app.router.add_get("/latest", _latest)
    app.router.add_get("/garbage", _garbage)
    srv = TestServer(app)
    await srv.start_server()
    yield srv
    await srv.close()


@pytest.fixture
async def client():
    cli = AiohttpClient(EnvSecrets(overrides={"XE_HTTP_TIMEOUT": "5"}))
    yield cli
    await cli.close()


# ── AiohttpClient ─────────────────────────────────────────────────────────────

async def test_get_returns_decoded_json(server: TestServer, client: AiohttpClient):
    body = await client.get(str(server.make_url("/latest?symbols=JPY")), {"apiKey": "secret"})
    assert body == {"success": True, "rates": {"JPY": 1.5}}


async def test_non_2xx_raises_with_status(server: TestServer, client: AiohttpClient):
    with pytest.raises(HttpError) as exc_info:
        await client.get(str(server.make_url("/latest?symbols=JPY")), {"apiKey": "wrong"})
    assert exc_info.value.status == 401


async def test_invalid_json_raises(server: TestServer, client: AiohttpClient):
    with pytest.raises(HttpError, match="invalid JSON"):
        await client.get(str(server.make_url("/garbage")))


async def test_connection_failure_raises(client: AiohttpClient):
    with pytest.raises(HttpError):
        await client.get("http://127.0.0.1:1/latest")


# ── MemoryHttpClient ──────────────────────────────────────────────────────────

async def test_memory_client_exact_and_prefix_match():
    mem = MemoryHttpClient()
    mem.add("https://api.test/latest", {"rates": {"JPY": 150.0}})
    mem.add("https://api.test/latest?symbols=EUR&base=USD", {"rates": {"EUR": 0.9}})
    assert await mem.get("https://api.test/latest?symbols=EUR&base=USD") == {"rates": {"EUR": 0.9}}
    assert await mem.get("https://api.test/latest?symbols=JPY&base=USD") == {"rates": {"JPY": 150.0}}
    assert len(mem.requests) == 2


async def test_memory_client_unmatched_is_404():
    mem = MemoryHttpClient()
    with pytest.raises(HttpError) as exc_info:
        await mem.get("https://api.test/nope", {"apiKey": "k"})
    assert exc_info.value.status == 404
    assert mem.requests[0].headers == {"apiKey": "k"}


async def test_memory_client_forced_failure():
    mem = MemoryHttpClient()
    mem.add("https://api.test/", {})
    mem.fail_with(HttpError("boom"))
    with pytest.raises(HttpError, match="boom"):
        await mem.get("https://api.test/latest")
