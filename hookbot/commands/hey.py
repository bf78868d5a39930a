from __future__ import annotations

from hookbot.commands.base import Command, CommandContext
from hookbot.interaction.models import CommandOption, CommandResponse, OptionChoice

_SUGGESTIONS = ("Loki", "IceCream", "Yoroshi")


class Hey(Command):
    name = "hey"
    description = "Say Hey to the user!"

    def options(self) -> list[CommandOption]:
        return [
            CommandOption(
                name="name",
                description="The user you want to say hey to",
                required=True,
                autocomplete=True,
            )
        ]

    async def respond(self, ctx: CommandContext) -> CommandResponse:
        name = ctx.options.get("name") or "Someone"
        return CommandResponse(content=f"Hey, {name}!")

    async def autocomplete(self, ctx: CommandContext) -> CommandResponse:
        typed = ctx.options.get("name", "").lower()
        return CommandResponse(
            choices=[
                OptionChoice(name=s.lower(), value=s)
                for s in _SUGGESTIONS
                if s.lower().startswith(typed)
            ]
        )
