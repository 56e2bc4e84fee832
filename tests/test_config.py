"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from anime_quotes.core.config import DevSettings, ProdSettings, Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("JIKAN_BASE_URL", raising=False)
    monkeypatch.delenv("ANIMECHAN_API_KEY", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    settings = Settings(_env_file=None)

    assert str(settings.jikan_base_url).startswith("https://api.jikan.moe/v4")
    assert settings.api_v1_prefix == "/v1"
    assert settings.animechan_api_key_plain() is None
    assert settings.cors_origins() == []


def test_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("JIKAN_BASE_URL", "http://localhost:9000/v4")
    monkeypatch.setenv("ANIMECHAN_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("ANIMECHAN_API_KEY", "k-123")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")

    settings = Settings(_env_file=None)

    assert str(settings.jikan_base_url).startswith("http://localhost:9000/v4")
    assert settings.animechan_timeout_seconds == 2.5
    assert settings.animechan_api_key_plain() == "k-123"
    assert settings.cors_origins() == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("name", ["JIKAN_TIMEOUT_SECONDS", "ANIMECHAN_TIMEOUT_SECONDS", "HTTP_MAX_CONNECTIONS"])
def test_rejects_non_positive_values(monkeypatch: pytest.MonkeyPatch, name: str):
    monkeypatch.setenv(name, "0")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_picks_environment_class(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DOCS_ENABLED", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)

    monkeypatch.setenv("APP_ENV", "prod")
    prod = get_settings()
    assert isinstance(prod, ProdSettings)
    assert prod.docs_enabled is False
    assert prod.log_json is True

    get_settings.cache_clear()
    monkeypatch.setenv("APP_ENV", "dev")
    dev = get_settings()
    assert isinstance(dev, DevSettings)
    assert dev.docs_enabled is True
    assert dev.log_json is False
