from __future__ import annotations

import pytest
from pydantic import ValidationError

from openkarotz.main.config import AppSettings, KarotzSettings, get_settings
from openkarotz.shared.consts import DEFAULT_TIMEOUT_SECONDS, EnumEnvironment

_KAROTZ_ENV = (
    "KAROTZ_HOSTNAME",
    "KAROTZ_HOST",
    "KAROTZ_TIMEOUT",
    "KAROTZ_TRUST_SELF_SIGNED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _KAROTZ_ENV:
        monkeypatch.delenv(key, raising=False)


def test_get_settings_loads_defaults() -> None:
    settings = get_settings()

    assert settings.karotz.hostname == "localhost"
    assert settings.karotz.timeout == DEFAULT_TIMEOUT_SECONDS
    assert settings.karotz.trust_self_signed is True
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("KAROTZ_HOSTNAME", "192.168.1.10")
    monkeypatch.setenv("KAROTZ_TIMEOUT", "2.5")
    monkeypatch.setenv("KAROTZ_TRUST_SELF_SIGNED", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.karotz.hostname == "192.168.1.10"
    assert settings.karotz.timeout == 2.5
    assert settings.karotz.trust_self_signed is False
    assert settings.logging.level.value == "DEBUG"


def test_hostname_short_alias(monkeypatch) -> None:
    monkeypatch.setenv("KAROTZ_HOST", "karotz.local")

    assert KarotzSettings().hostname == "karotz.local"


def test_timeout_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("KAROTZ_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        KarotzSettings()


def test_settings_by_field_name() -> None:
    settings = KarotzSettings(hostname="rabbit:8080", timeout=1)

    assert settings.hostname == "rabbit:8080"
    assert settings.timeout == 1.0
