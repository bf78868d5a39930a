"""Interactions webhook service.

Receives chat-platform interactions over HTTP and answers them synchronously.

Endpoints::

    POST /interactions   interaction JSON -> interaction response JSON
    GET  /health         {"status": "ok", "kv": bool}

Status codes::

    200  handled (including pings)
    400  body is not JSON, not an interaction, names an unknown command,
         or passes options the command does not recognise
    500  the command failed (store write, exchange API, missing token);
         body is {"error": "Interaction failed"}

Args:
    port: TCP port to listen on (default 8787)
"""

from __future__ import annotations

from aiohttp import web

from hookbot.config.context import ModuleConfig
from hookbot.errors import HookbotError, InvalidOptionsError, InvalidPayloadError, UnknownCommandError
from hookbot.interaction.dispatcher import Dispatcher
from hookbot.interaction.models import Interaction
from hookbot.modules.base import AsyncModule
from hookbot.services.bundle import BotServices
from hookbot.services.lifecycle.lifecycle_manager import LifecycleManager
from hookbot.services.logger.interface import LoggingInterface

DEFAULT_PORT = 8787


class InteractionsModule(AsyncModule):
    log: LoggingInterface

    def __init__(
        self,
        config: ModuleConfig,
        services: BotServices,
        lifecycle: LifecycleManager,
    ) -> None:
        self.config = config
        self.services = services
        self.lifecycle = lifecycle
        self.dispatcher = Dispatcher(services)
        self._runner: web.AppRunner | None = None

    async def initialize(self) -> None:
        self.log = self.services.log
        self.port = self.config.get_int("port", DEFAULT_PORT)

    async def validate(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")

    async def execute(self) -> int:
        self._runner = web.AppRunner(self.create_app())
        await self._runner.setup()
        site = web.TCPSite(self._runner, "0.0.0.0", self.port)
        await site.start()
        self.log.info("Interactions service listening", port=self.port)

        self.lifecycle.on_shutdown(self.services.http.close)
        self.lifecycle.on_shutdown(self._stop_server)
        await self.lifecycle.wait()
        return 0

    async def teardown(self) -> None:
        await self.lifecycle.shutdown()

    def create_app(self) -> web.Application:
        app = web.Application()
        app.router.add_post("/interactions", self._interactions)
        app.router.add_get("/health", self._health)
        return app

    async def _stop_server(self) -> None:
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            self.log.info("Interactions service stopped")

    # ------------------------------------------------------------------
    # Request handlers
    # ------------------------------------------------------------------

    async def _health(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok", "kv": self.services.kv.health_check()})

    async def _interactions(self, request: web.Request) -> web.Response:
        try:
            body = await request.json()
        except ValueError:
            return web.json_response({"error": "Invalid JSON body"}, status=400)

        interaction: Interaction | None = None
        try:
            interaction = Interaction.from_dict(body)
            response = await self.dispatcher.perform(interaction)
        except (InvalidPayloadError, UnknownCommandError, InvalidOptionsError) as exc:
            self.log.warn("Rejected interaction", error=str(exc))
            return web.json_response({"error": str(exc)}, status=400)
        except HookbotError as exc:
            self.services.metrics.counter("interactions_failed")
            self.log.error(
                "Interaction failed",
                command=interaction.command_name if interaction else None,
                username=interaction.username if interaction else None,
                error=str(exc),
            )
            return web.json_response({"error": "Interaction failed"}, status=500)

        self.log.debug(
            "Interaction handled",
            type=interaction.type.name,
            command=interaction.command_name,
        )
        return web.json_response(response)


module_class = InteractionsModule
