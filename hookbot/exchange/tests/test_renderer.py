"""Tests for the xe embeds and the ASCII plot."""

from __future__ import annotations

import pytest

from hookbot.exchange.plot import plot
from hookbot.exchange.renderer import (
    EXCHANGE_COLOR,
    format_amount,
    render_defaults_updated,
    render_rate,
    render_timeseries,
)
from hookbot.exchange.resolver import ConversionRequest, TimeseriesRequest
from hookbot.exchange.service import ConversionResult, TimeseriesResult


def _rate(amount: float, rate: float, precision: int, pair=("EUR", "AUD")) -> str:
    request = ConversionRequest(pair[0], pair[1], amount, precision)
    return render_rate(ConversionResult(request, rate)).description


# ── Rate ──────────────────────────────────────────────────────────────────────

def test_rate_description():
    assert _rate(250.0, 1.6, 2) == "250 EUR --> 400.00 AUD"


@pytest.mark.parametrize("precision", [0, 1, 4, 12])
def test_precision_up_to_twelve_used_exactly(precision):
    converted = _rate(1.0, 1.0 / 3.0, precision).split(" --> ")[1].split(" ")[0]
    decimals = converted.split(".")[1] if "." in converted else ""
    assert len(decimals) == precision


@pytest.mark.parametrize("precision", [13, 20, 255])
def test_precision_above_twelve_clamped(precision):
    converted = _rate(1.0, 1.0 / 3.0, precision).split(" --> ")[1].split(" ")[0]
    assert len(converted.split(".")[1]) == 12


def test_rate_embed_shape():
    embed = render_rate(ConversionResult(ConversionRequest("USD", "JPY", 1.0, 4), 150.0))
    assert embed.to_dict() == {
        "title": "Exchange Rate",
        "description": "1 USD --> 150.0000 JPY",
        "fields": [],
        "color": EXCHANGE_COLOR,
    }


@pytest.mark.parametrize("amount, text", [(250.0, "250"), (2.5, "2.5"), (-4.0, "-4"), (0.1, "0.1")])
def test_format_amount(amount, text):
    assert format_amount(amount) == text


def test_defaults_updated_embed():
    embed = render_defaults_updated()
    assert embed.title == "Exchange Rate"
    assert embed.description == "Defaults have been updated"
    assert embed.color == 0xFDC835


# ── Timeseries ────────────────────────────────────────────────────────────────

def test_timeseries_embed_fields_and_plot():
    points = [("2023-01-01", 130.456), ("2023-01-02", 128.123), ("2023-01-03", 131.999)]
    result = TimeseriesResult(
        ConversionRequest("USD", "JPY", 1.0, 4), TimeseriesRequest("2023-01-01", "2023-01-03"), points,
    )
    embed = render_timeseries(result).to_dict()
    assert embed["title"] == "Exchange Rate Timeseries"
    assert embed["description"].startswith("USD --> JPY (2023-01-01 to 2023-01-03)\n```\n")
    assert embed["description"].endswith("\n```")
    assert plot([130.456, 128.123, 131.999]) in embed["description"]
    assert embed["fields"] == [
        {"name": "Min", "value": "128.12", "inline": True},
        {"name": "Max", "value": "132.00", "inline": True},
    ]


# ── Plot ──────────────────────────────────────────────────────────────────────

def test_plot_shape():
    assert plot([1.0, 2.0, 3.0, 2.0], height=2).splitlines() == [
        "     3.0000 ┤ ╭╮",
        "     2.0000 ┤╭╯╰",
        "     1.0000 ┼╯",
    ]


def test_plot_flat_series_is_one_row():
    assert plot([5.0, 5.0, 5.0]) == "     5.0000 ┼──"


def test_plot_height_bounds_rows():
    lines = plot([0.91, 0.95, 0.93, 0.99, 0.90], height=10).splitlines()
    assert len(lines) == 11
    assert lines[0].startswith("     0.9900")
    assert lines[-1].startswith("     0.9000")


def test_plot_empty_series():
    assert plot([]) == ""


def test_plot_single_point():
    assert plot([1.5]) == "     1.5000 ┼"
