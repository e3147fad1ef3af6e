from __future__ import annotations

import os

import pytest

from seedkit.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("SEEDKIT_"):
            monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env out of test runs.
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "demo: tests for the example SQLAlchemy seeders (in-memory SQLite)",
    )
