"""Turns raw ``xe`` options into concrete requests.

Explicit values win over the user's saved preferences, which win over the
built-in defaults. Nothing here fails: unusable input falls back to a default,
and currency codes or dates are passed on unchecked for the upstream API to
judge.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from hookbot.exchange.options import XEOptions
from hookbot.exchange.preferences import PreferenceStore, parse_precision

TIMESERIES_WINDOW_DAYS = 14


@dataclass(frozen=True)
class ConversionRequest:
    from_currency: str
    to_currency: str
    amount: float
    precision: int


@dataclass(frozen=True)
class TimeseriesRequest:
    start_date: str   # YYYY-MM-DD
    end_date: str     # YYYY-MM-DD


def parse_amount(raw: str | None) -> float:
    """Parse a finite float, defaulting to 1.0."""
    if raw is None:
        return 1.0
    try:
        amount = float(raw.strip())
    except ValueError:
        return 1.0
    return amount if math.isfinite(amount) else 1.0


def _explicit_code(raw: str | None) -> str | None:
    if raw is None or not raw.strip():
        return None
    return raw.strip().upper()


def _today() -> date:
    return datetime.now(timezone.utc).date()


class ExchangeResolver:
    def __init__(self, preferences: PreferenceStore) -> None:
        self.preferences = preferences

    def resolve(self, options: XEOptions, username: str) -> ConversionRequest:
        from_currency = _explicit_code(options.from_currency)
        if from_currency is None:
            from_currency = self.preferences.get_default_from(username)

        to_currency = _explicit_code(options.to_currency)
        if to_currency is None:
            to_currency = self.preferences.get_default_to(username)

        precision = parse_precision(options.precision)
        if precision is None:
            precision = self.preferences.get_default_precision(username)

        return ConversionRequest(
            from_currency=from_currency,
            to_currency=to_currency,
            amount=parse_amount(options.amount),
            precision=precision,
        )

    def resolve_dates(self, raw: str | None, today: date | None = None) -> TimeseriesRequest:
        """Split ``START_END`` on underscores, keeping the first two tokens.

        Each side falls back on its own: start to 14 days ago, end to today.
        """
        today = today or _today()
        tokens = (raw or "").strip().split("_")[:2]
        start = tokens[0].strip()
        end = tokens[1].strip() if len(tokens) > 1 else ""
        return TimeseriesRequest(
            start_date=start or (today - timedelta(days=TIMESERIES_WINDOW_DAYS)).isoformat(),
            end_date=end or today.isoformat(),
        )
