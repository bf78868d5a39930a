"""Routes interactions to commands by name."""

from __future__ import annotations

from typing import Any, Mapping

from hookbot.commands.base import Command, CommandContext
from hookbot.commands.registry import COMMANDS
from hookbot.errors import InvalidPayloadError, UnknownCommandError
from hookbot.interaction.models import (
    Interaction,
    InteractionResponseType,
    InteractionType,
    interaction_response,
)
from hookbot.services.bundle import BotServices


class Dispatcher:
    def __init__(
        self, services: BotServices, commands: Mapping[str, Command] = COMMANDS
    ) -> None:
        self.services = services
        self.commands = commands

    async def perform(self, interaction: Interaction) -> dict[str, Any]:
        """Return the response body for *interaction*.

        Raises ``InvalidPayloadError`` for interaction types the bot does not
        handle and ``UnknownCommandError`` for unregistered command names;
        errors from the command itself propagate unchanged.
        """
        if interaction.type == InteractionType.PING:
            return interaction_response(InteractionResponseType.PONG)

        if interaction.type == InteractionType.APPLICATION_COMMAND:
            command, ctx = self._route(interaction)
            data = await command.respond(ctx)
            self.services.metrics.counter("interactions_handled", tags={"command": command.name})
            return interaction_response(InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, data)

        if interaction.type == InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE:
            command, ctx = self._route(interaction)
            data = await command.autocomplete(ctx)
            return interaction_response(
                InteractionResponseType.APPLICATION_COMMAND_AUTOCOMPLETE_RESULT, data
            )

        raise InvalidPayloadError(f"interaction type {interaction.type.name} not implemented")

    def _route(self, interaction: Interaction) -> tuple[Command, CommandContext]:
        if not interaction.command_name:
            raise InvalidPayloadError("data not found")
        command = self.commands.get(interaction.command_name)
        if command is None:
            raise UnknownCommandError(interaction.command_name)
        ctx = CommandContext(
            services=self.services,
            username=interaction.username,
            options=interaction.options,
            focused=interaction.focused,
        )
        return command, ctx
