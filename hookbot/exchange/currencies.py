"""Currency codes offered as choices by the ``xe`` command, plus the built-in defaults."""

from __future__ import annotations

from enum import Enum


class CurrencyCode(str, Enum):
    USD = "USD"
    EUR = "EUR"
    JPY = "JPY"
    BGN = "BGN"
    BTC = "BTC"
    CZK = "CZK"
    DKK = "DKK"
    GBP = "GBP"
    SEK = "SEK"
    CHF = "CHF"
    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CNY = "CNY"
    HKD = "HKD"
    INR = "INR"
    KRW = "KRW"
    MXN = "MXN"
    MYR = "MYR"
    NZD = "NZD"
    PHP = "PHP"
    SGD = "SGD"


DEFAULT_FROM = CurrencyCode.USD.value
DEFAULT_TO = CurrencyCode.JPY.value
DEFAULT_PRECISION = 4
MAX_PRECISION = 12
