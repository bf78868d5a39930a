"""The ``xe`` currency-conversion command.

Modes, checked in order:

1. ``set_defaults: True`` saves from/to/precision for the caller;
2. ``timeseries`` present: plots the pair's history over a date window;
3. otherwise converts ``amount`` at the latest rate.
"""

from __future__ import annotations

from hookbot.commands.base import Command, CommandContext
from hookbot.errors import InvalidPayloadError
from hookbot.exchange.currencies import CurrencyCode
from hookbot.exchange.options import RECOGNISED_OPTIONS, XEOptions
from hookbot.exchange.renderer import render_defaults_updated, render_rate, render_timeseries
from hookbot.interaction.models import CommandOption, CommandResponse, OptionChoice


class XE(Command):
    name = "xe"
    description = "Convert from one currency to another"

    def options(self) -> list[CommandOption]:
        currencies = [OptionChoice(name=c.value, value=c.value) for c in CurrencyCode]
        choices = {
            "from": currencies,
            "to": currencies,
            "set_defaults": [OptionChoice("True", "True"), OptionChoice("False", "False")],
        }
        return [
            CommandOption(name=name, description=description, choices=choices.get(name))
            for name, description in RECOGNISED_OPTIONS.items()
        ]

    async def respond(self, ctx: CommandContext) -> CommandResponse:
        if not ctx.username:
            raise InvalidPayloadError("xe needs the invoking user")
        options = XEOptions.from_options(ctx.options)
        exchange = ctx.services.exchange

        if options.set_defaults:
            exchange.set_defaults(options, ctx.username)
            return CommandResponse(embeds=[render_defaults_updated()])

        request = exchange.resolver.resolve(options, ctx.username)

        if options.wants_timeseries:
            window = exchange.resolver.resolve_dates(options.timeseries)
            series = await exchange.get_timeseries(request, window)
            return CommandResponse(embeds=[render_timeseries(series)])

        result = await exchange.get_rate(request)
        return CommandResponse(embeds=[render_rate(result)])
