from __future__ import annotations

import pytest

from hookbot.errors import InvalidPayloadError, UnknownCommandError
from hookbot.interaction.dispatcher import Dispatcher
from hookbot.interaction.models import Interaction, InteractionType
from hookbot.services.bundle import BotServices
from hookbot.services.metrics.memory_metrics import MemoryMetrics


async def test_ping_pongs(services: BotServices):
    assert await Dispatcher(services).perform(Interaction(type=InteractionType.PING)) == {"type": 1}


async def test_command_routed_by_name(services: BotServices, metrics: MemoryMetrics):
    interaction = Interaction(
        type=InteractionType.APPLICATION_COMMAND, command_name="hey", options={"name": "Yoroshi"},
    )
    body = await Dispatcher(services).perform(interaction)
    assert body == {"type": 4, "data": {"content": "Hey, Yoroshi!"}}
    assert metrics.counters["interactions_handled{command=hey}"] == 1


async def test_autocomplete_routed(services: BotServices):
    interaction = Interaction(
        type=InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE, command_name="hey",
        options={"name": "y"}, focused="name",
    )
    body = await Dispatcher(services).perform(interaction)
    assert body == {"type": 8, "data": {"choices": [{"name": "yoroshi", "value": "Yoroshi"}]}}


async def test_unknown_command(services: BotServices):
    interaction = Interaction(type=InteractionType.APPLICATION_COMMAND, command_name="jisho")
    with pytest.raises(UnknownCommandError, match="jisho"):
        await Dispatcher(services).perform(interaction)


async def test_command_without_data(services: BotServices):
    with pytest.raises(InvalidPayloadError, match="data not found"):
        await Dispatcher(services).perform(Interaction(type=InteractionType.APPLICATION_COMMAND))


async def test_unsupported_interaction_type(services: BotServices):
    with pytest.raises(InvalidPayloadError, match="MODAL_SUBMIT"):
        await Dispatcher(services).perform(Interaction(type=InteractionType.MODAL_SUBMIT))
