"""Typed option set of the ``xe`` command.

The chat platform delivers options as a list of ``{name, value}`` pairs; they
are flattened to ``dict[str, str]`` by the dispatcher and checked here against
the recognised names. Values stay raw strings: defaulting and parsing belong to
``ExchangeResolver``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from hookbot.errors import InvalidOptionsError

# option name -> effect
RECOGNISED_OPTIONS: dict[str, str] = {
    "from": "The currency to convert from (default: your saved default, else USD)",
    "to": "The currency to convert to (default: your saved default, else JPY)",
    "amount": "The amount of the currency (number, default 1)",
    "precision": "Precision of the decimal points (max 12, default: 4)",
    "timeseries": "Get a timeseries graph of historical data (format: YYYY-MM-DD_YYYY-MM-DD)",
    "set_defaults": "Save from, to and precision as your defaults",
}


@dataclass(frozen=True)
class XEOptions:
    from_currency: str | None = None
    to_currency: str | None = None
    amount: str | None = None
    precision: str | None = None
    timeseries: str | None = None
    set_defaults: bool = False

    @property
    def wants_timeseries(self) -> bool:
        return self.timeseries is not None

    @classmethod
    def from_options(cls, options: Mapping[str, str]) -> "XEOptions":
        unknown = sorted(set(options) - set(RECOGNISED_OPTIONS))
        if unknown:
            raise InvalidOptionsError(f"Unrecognised xe option(s): {', '.join(unknown)}")
        return cls(
            from_currency=options.get("from"),
            to_currency=options.get("to"),
            amount=options.get("amount"),
            precision=options.get("precision"),
            timeseries=options.get("timeseries"),
            set_defaults="True" in options.get("set_defaults", ""),
        )
