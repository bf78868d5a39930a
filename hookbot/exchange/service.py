"""Exchange rates from the apilayer "fixer" API, behind the key-value caches.

Single rates are cached for four hours per currency pair; historical windows
are cached forever. Any upstream failure fails the request: there is no retry
and no fallback to a stale entry.

Usage::

    service = ExchangeService(kv=store, http=client, secrets=secrets, log=log, metrics=metrics)
    request = service.resolver.resolve(XEOptions(to_currency="EUR"), "alice")
    result = await service.get_rate(request)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from hookbot.errors import HttpError, UpstreamError
from hookbot.exchange.options import XEOptions
from hookbot.exchange.preferences import PreferenceStore
from hookbot.exchange.rate_cache import RateCache
from hookbot.exchange.resolver import ConversionRequest, ExchangeResolver, TimeseriesRequest
from hookbot.exchange.timeseries_cache import TimeseriesCache, TimeseriesMap
from hookbot.services.http.interface import HttpClientInterface
from hookbot.services.kv.interface import KeyValueStoreInterface
from hookbot.services.logger.interface import LoggingInterface
from hookbot.services.metrics.interface import MetricsInterface
from hookbot.services.secrets.interface import SecretsInterface

DEFAULT_API_BASE_URL = "https://api.apilayer.com/fixer"


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    rate: float

    @property
    def converted(self) -> float:
        return self.request.amount * self.rate


@dataclass(frozen=True)
class TimeseriesResult:
    request: ConversionRequest
    window: TimeseriesRequest
    points: list[tuple[str, float]]  # (date, rate), oldest first

    @property
    def rates(self) -> list[float]:
        return [rate for _, rate in self.points]

    @property
    def minimum(self) -> float:
        return min(self.rates)

    @property
    def maximum(self) -> float:
        return max(self.rates)


def _as_rate(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


class ExchangeService:
    def __init__(
        self,
        kv: KeyValueStoreInterface,
        http: HttpClientInterface,
        secrets: SecretsInterface,
        log: LoggingInterface,
        metrics: MetricsInterface,
    ) -> None:
        self.http = http
        self.secrets = secrets
        self.log = log
        self.metrics = metrics
        self.base_url = secrets.get_or_default("XE_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
        self.preferences = PreferenceStore(kv, log)
        self.resolver = ExchangeResolver(self.preferences)
        self.rate_cache = RateCache(kv, log)
        self.timeseries_cache = TimeseriesCache(kv, log)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def get_rate(self, request: ConversionRequest) -> ConversionResult:
        """Return the conversion for *request*, fetching the rate on a cache miss."""
        if request.from_currency == request.to_currency:
            return ConversionResult(request, 1.0)

        cached = self.rate_cache.lookup(request.from_currency, request.to_currency)
        if cached is not None:
            self.metrics.counter("xe_rate_cache_hit")
            self.log.debug(
                "Rate cache hit", currency_from=request.from_currency,
                currency_to=request.to_currency,
            )
            return ConversionResult(request, cached)

        self.metrics.counter("xe_rate_cache_miss")
        body = await self._fetch(
            "latest", {"symbols": request.to_currency, "base": request.from_currency}
        )
        rates = body.get("rates")
        rate = _as_rate(rates.get(request.to_currency)) if isinstance(rates, dict) else None
        if rate is None:
            self.metrics.counter("xe_upstream_failures")
            raise UpstreamError(
                f"Upstream returned no {request.to_currency} rate for base {request.from_currency}"
            )

        self.rate_cache.store(request.from_currency, request.to_currency, rate)
        return ConversionResult(request, rate)

    async def get_timeseries(
        self, request: ConversionRequest, window: TimeseriesRequest
    ) -> TimeseriesResult:
        """Return the daily rates of *request*'s pair across *window*, oldest first.

        A fetched window is cached only once it yields at least one point for
        the target currency, so a cache hit always produces a result.
        """
        args = (window.start_date, window.end_date, request.from_currency, request.to_currency)

        cached = self.timeseries_cache.lookup(*args)
        if cached is not None:
            points = self._extract_points(cached, request.to_currency)
            if points:
                self.metrics.counter("xe_timeseries_cache_hit")
                return TimeseriesResult(request, window, points)

        self.metrics.counter("xe_timeseries_cache_miss")
        body = await self._fetch(
            "timeseries",
            {
                "symbols": request.to_currency,
                "base": request.from_currency,
                "start_date": window.start_date,
                "end_date": window.end_date,
            },
        )
        rates = body.get("rates") or {}
        if not isinstance(rates, dict):
            self.metrics.counter("xe_upstream_failures")
            raise UpstreamError("Upstream timeseries 'rates' is not an object")

        points = self._extract_points(rates, request.to_currency)
        if not points:
            self.metrics.counter("xe_upstream_failures")
            raise UpstreamError(
                f"No {request.to_currency} rates between {window.start_date} and {window.end_date}"
            )
        self.timeseries_cache.store(*args, rates)
        return TimeseriesResult(request, window, points)

    def set_defaults(self, options: XEOptions, username: str) -> ConversionRequest:
        """Persist the resolved from/to/precision as *username*'s defaults."""
        request = self.resolver.resolve(options, username)
        self.preferences.set_defaults(
            username, request.from_currency, request.to_currency, request.precision
        )
        return request

    # ------------------------------------------------------------------
    # Upstream
    # ------------------------------------------------------------------

    async def _fetch(self, endpoint: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}?{urlencode(params)}"
        headers = {"apiKey": self.secrets.require("CURR_CONV_TOKEN")}

        self.metrics.counter("xe_upstream_requests", tags={"endpoint": endpoint})
        try:
            with self.metrics.timed("xe_upstream_latency_seconds", tags={"endpoint": endpoint}):
                body = await self.http.get(url, headers)
        except HttpError as exc:
            self.metrics.counter("xe_upstream_failures")
            self.log.error("Exchange API request failed", endpoint=endpoint, error=str(exc))
            raise UpstreamError(f"Exchange API {endpoint} request failed: {exc}") from exc

        self.log.debug("Exchange API response", endpoint=endpoint, body=body)

        if not isinstance(body, dict):
            self.metrics.counter("xe_upstream_failures")
            raise UpstreamError(f"Exchange API {endpoint} returned a non-object body")
        if body.get("success") is False:
            self.metrics.counter("xe_upstream_failures")
            error = body.get("error") or {}
            detail = error.get("info") or error.get("type") if isinstance(error, dict) else error
            raise UpstreamError(f"Exchange API {endpoint} reported failure: {detail}")
        return body

    @staticmethod
    def _extract_points(rates: TimeseriesMap, to_currency: str) -> list[tuple[str, float]]:
        points = []
        for day in sorted(rates):
            day_rates = rates[day]
            rate = _as_rate(day_rates.get(to_currency)) if isinstance(day_rates, dict) else None
            if rate is not None:
                points.append((day, rate))
        return points
