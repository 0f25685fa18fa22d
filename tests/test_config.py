# =============================================================================
# tests/test_config.py  -  Environment-driven settings
# =============================================================================

import pytest

from core.config import Settings

_VARS = ("REDDIT_BASE_URL", "REDDIT_USER_AGENT", "REDDIT_MIN_INTERVAL_MS", "REDDIT_TIMEOUT_SECONDS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.base_url == "https://www.reddit.com"
    assert settings.user_agent == "reddit-mcp/1.0.0"
    assert settings.min_interval_ms == 1000
    assert settings.min_interval == 1.0
    assert settings.timeout_seconds == 15.0


def test_overrides(monkeypatch):
    monkeypatch.setenv("REDDIT_BASE_URL", "https://old.reddit.com/")
    monkeypatch.setenv("REDDIT_USER_AGENT", "my-bot/2.0 (by u/someone)")
    monkeypatch.setenv("REDDIT_MIN_INTERVAL_MS", "2500")
    monkeypatch.setenv("REDDIT_TIMEOUT_SECONDS", "3.5")

    settings = Settings.from_env()

    assert settings.base_url == "https://old.reddit.com"
    assert settings.user_agent == "my-bot/2.0 (by u/someone)"
    assert settings.min_interval == 2.5
    assert settings.timeout_seconds == 3.5


@pytest.mark.parametrize("raw", ["fast", "-5", "1.5", ""])
def test_bad_interval_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("REDDIT_MIN_INTERVAL_MS", raw)

    assert Settings.from_env().min_interval_ms == 1000


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(AttributeError):
        settings.min_interval_ms = 0
