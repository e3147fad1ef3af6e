import logging

import pytest

from seedkit.config import get_settings
from seedkit.exceptions import ConfigurationError
from seedkit.logging_setup import configure_logging, resolve_log_level


def test_settings_defaults():
    settings = get_settings()

    assert settings.APP_NAME == "seeder"
    assert settings.REGISTRY == "seedkit.demo:build_registry"
    assert settings.LOG_LEVEL == "INFO"
    assert settings.FAKER_SEED is None


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SEEDKIT_APP_NAME", "my-app seeder")
    monkeypatch.setenv("SEEDKIT_FAKER_SEED", "7")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.APP_NAME == "my-app seeder"
    assert settings.FAKER_SEED == 7


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    "raw, expected",
    [("INFO", logging.INFO), ("debug", logging.DEBUG), (" warning ", logging.WARNING)],
)
def test_resolve_log_level(raw, expected):
    assert resolve_log_level(raw) == expected


@pytest.mark.parametrize("raw", ["", "LOUD", "info!"])
def test_resolve_log_level_rejects_unknown(raw):
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_log_level(raw)

    assert excinfo.value.details == {"config_key": "LOG_LEVEL"}
    assert excinfo.value.code == "CONFIGURATION_ERROR"


def test_configure_logging_uses_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("SEEDKIT_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    configure_logging()

    assert calls == [
        {"level": logging.DEBUG, "format": get_settings().LOG_FORMAT},
    ]
