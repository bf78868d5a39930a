import io

import pytest

from hookbot.services.logger.factory import LoggerFactory
from hookbot.services.logger.memory_logger import MemoryLogger
from hookbot.services.logger.pretty_logger import PrettyLogger


def test_default_is_pretty():
    assert isinstance(LoggerFactory().create(), PrettyLogger)


def test_logger_is_shared():
    factory = LoggerFactory(impl="memory")
    assert factory.create() is factory.create()


def test_unknown_impl_rejected():
    with pytest.raises(ValueError, match="available: pretty, memory"):
        LoggerFactory(impl="loki")


def test_memory_logger_records_context():
    log = LoggerFactory(impl="memory").create()
    assert isinstance(log, MemoryLogger)
    log.warn("Preference read failed", key="alice:currency_from")
    log.debug("ok")
    assert log.messages == ["Preference read failed", "ok"]
    assert log.at("WARN")[0].ctx == {"key": "alice:currency_from"}
    assert log.at("DEBUG")[0].ctx == {}


def test_pretty_logger_respects_level():
    out = io.StringIO()
    log = PrettyLogger(level="warn", stream=out)
    log.info("hidden")
    log.error("shown", command="xe", username="alice")
    text = out.getvalue()
    assert "hidden" not in text
    assert "ERROR" in text
    assert text.rstrip().endswith("shown command=xe username=alice")


def test_pretty_logger_unknown_level_means_info():
    out = io.StringIO()
    log = PrettyLogger(level="chatty", stream=out)
    log.debug("hidden")
    log.info("shown")
    assert "hidden" not in out.getvalue()
    assert "shown" in out.getvalue()
