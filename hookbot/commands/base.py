from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from hookbot.interaction.models import CommandOption, CommandResponse
from hookbot.services.bundle import BotServices


@dataclass
class CommandContext:
    """Everything a command sees about one invocation."""

    services: BotServices
    username: str | None = None
    options: dict[str, str] = field(default_factory=dict)
    focused: str | None = None


class Command(ABC):
    """Base class for chat commands.

    Subclasses set ``name`` and ``description`` and implement ``respond``.
    """

    name: str
    description: str

    def options(self) -> list[CommandOption]:
        """Registration definition of the command's options."""
        return []

    @abstractmethod
    async def respond(self, ctx: CommandContext) -> CommandResponse:
        ...

    async def autocomplete(self, ctx: CommandContext) -> CommandResponse:
        """Suggestions for the focused option. No suggestions by default."""
        return CommandResponse()

    def definition(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "options": [o.to_dict() for o in self.options()],
        }
