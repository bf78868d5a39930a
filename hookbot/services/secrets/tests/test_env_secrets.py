import pytest

from hookbot.services.secrets.env_secrets import EnvSecrets, MissingSecretError


def test_reads_from_environment(monkeypatch):
    monkeypatch.setenv("CURR_CONV_TOKEN", "from-env")
    assert EnvSecrets().get("CURR_CONV_TOKEN") == "from-env"


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("CURR_CONV_TOKEN", "from-env")
    secrets = EnvSecrets(overrides={"CURR_CONV_TOKEN": "override"})
    assert secrets.get("CURR_CONV_TOKEN") == "override"


def test_get_or_default_treats_blank_as_missing():
    secrets = EnvSecrets(overrides={"XE_API_BASE_URL": ""})
    assert secrets.get_or_default("XE_API_BASE_URL", "https://fallback") == "https://fallback"


def test_require_missing_raises(monkeypatch):
    monkeypatch.delenv("HOOKBOT_NOT_SET", raising=False)
    with pytest.raises(MissingSecretError, match="HOOKBOT_NOT_SET"):
        EnvSecrets().require("HOOKBOT_NOT_SET")


def test_missing_secret_is_a_key_error():
    with pytest.raises(KeyError):
        EnvSecrets(overrides={"X": ""}).require("X")
