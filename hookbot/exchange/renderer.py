"""Builds the ``xe`` command's embeds from service results."""

from __future__ import annotations

from hookbot.exchange.currencies import MAX_PRECISION
from hookbot.exchange.plot import plot
from hookbot.exchange.service import ConversionResult, TimeseriesResult
from hookbot.interaction.embed import Embed, EmbedField

EXCHANGE_COLOR = 0xFDC835
RATE_TITLE = "Exchange Rate"
TIMESERIES_TITLE = "Exchange Rate Timeseries"


def format_amount(amount: float) -> str:
    """Shortest form of *amount*: ``250`` rather than ``250.0``."""
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)


def clamp_precision(precision: int) -> int:
    return max(0, min(precision, MAX_PRECISION))


def render_rate(result: ConversionResult) -> Embed:
    request = result.request
    precision = clamp_precision(request.precision)
    return Embed(
        title=RATE_TITLE,
        description=(
            f"{format_amount(request.amount)} {request.from_currency} --> "
            f"{result.converted:.{precision}f} {request.to_currency}"
        ),
        color=EXCHANGE_COLOR,
    )


def render_timeseries(result: TimeseriesResult) -> Embed:
    request, window = result.request, result.window
    header = (
        f"{request.from_currency} --> {request.to_currency} "
        f"({window.start_date} to {window.end_date})"
    )
    return Embed(
        title=TIMESERIES_TITLE,
        description=f"{header}\n```\n{plot(result.rates)}\n```",
        fields=[
            EmbedField(name="Min", value=f"{result.minimum:.2f}", inline=True),
            EmbedField(name="Max", value=f"{result.maximum:.2f}", inline=True),
        ],
        color=EXCHANGE_COLOR,
    )


def render_defaults_updated() -> Embed:
    return Embed(title=RATE_TITLE, description="Defaults have been updated", color=EXCHANGE_COLOR)
