from __future__ import annotations

from dataclasses import dataclass

from hookbot.exchange.service import ExchangeService
from hookbot.services.http.interface import HttpClientInterface
from hookbot.services.kv.interface import KeyValueStoreInterface
from hookbot.services.logger.interface import LoggingInterface
from hookbot.services.metrics.interface import MetricsInterface
from hookbot.services.secrets.interface import SecretsInterface


@dataclass
class BotServices:
    """Long-lived collaborators shared by every command invocation."""

    kv: KeyValueStoreInterface
    http: HttpClientInterface
    secrets: SecretsInterface
    log: LoggingInterface
    metrics: MetricsInterface

    def __post_init__(self) -> None:
        self.exchange = ExchangeService(
            kv=self.kv, http=self.http, secrets=self.secrets, log=self.log, metrics=self.metrics,
        )
