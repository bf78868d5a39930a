"""Stops the webhook service cleanly on SIGTERM/SIGINT.

Components register cleanup callbacks with :meth:`LifecycleManager.on_shutdown`;
they run newest first, so the listener stops before the HTTP session it
depends on is closed.
"""

from __future__ import annotations

import asyncio
import inspect
import signal
from typing import Awaitable, Callable, Union

from hookbot.services.logger.interface import LoggingInterface

ShutdownHook = Union[Callable[[], None], Callable[[], Awaitable[None]]]


class LifecycleManager:
    def __init__(self, log: LoggingInterface | None = None) -> None:
        self.log = log
        self._hooks: list[ShutdownHook] = []
        self._requested = asyncio.Event()
        self._hooks_ran = False

    @property
    def is_shutting_down(self) -> bool:
        return self._requested.is_set()

    def on_shutdown(self, callback: ShutdownHook) -> None:
        self._hooks.append(callback)

    def install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, self._trigger_shutdown_from_signal)

    async def wait(self) -> None:
        """Block until a signal or :meth:`shutdown` asks the service to stop."""
        await self._requested.wait()

    async def shutdown(self) -> None:
        """Release waiters, then run each hook once in reverse registration order.

        A failing hook is logged and the remaining hooks still run.
        """
        self._requested.set()
        if self._hooks_ran:
            return
        self._hooks_ran = True

        while self._hooks:
            hook = self._hooks.pop()
            try:
                result = hook()
                if inspect.isawaitable(result):
                    await result
            except Exception as exc:
                if self.log is not None:
                    self.log.error(
                        "Shutdown hook failed",
                        hook=getattr(hook, "__qualname__", repr(hook)),
                        error=str(exc),
                    )

    def _trigger_shutdown_from_signal(self) -> None:
        self._requested.set()
