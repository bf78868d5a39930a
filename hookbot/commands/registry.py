"""Process-wide, read-only table of the bot's commands, built once at import."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from hookbot.commands.base import Command
from hookbot.commands.hey import Hey
from hookbot.commands.xe import XE

COMMANDS: Mapping[str, Command] = MappingProxyType({c.name: c for c in (Hey(), XE())})


def get_command(name: str) -> Command | None:
    return COMMANDS.get(name)


def command_definitions() -> list[dict[str, Any]]:
    """Definitions to register with the chat platform, one per command."""
    return [command.definition() for command in COMMANDS.values()]
