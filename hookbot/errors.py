"""Exception hierarchy shared by the dispatcher, the services and the commands."""

from __future__ import annotations


class HookbotError(Exception):
    """Base class for every error raised inside hookbot."""


class StoreError(HookbotError):
    """A key-value store read or write failed."""


class HttpError(HookbotError):
    """An outbound HTTP call failed (transport, status or body decoding)."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class UpstreamError(HookbotError):
    """The exchange-rate API could not produce the requested data."""


class InvalidOptionsError(HookbotError):
    """A command received options it does not recognise."""


class InteractionError(HookbotError):
    """A command handler could not produce a response."""


class UnknownCommandError(InteractionError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command '{name}'")
        self.name = name


class InvalidPayloadError(HookbotError):
    """The inbound interaction body is not a usable interaction."""
