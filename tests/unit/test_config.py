"""Unit tests for settings."""

import pytest

from surmise.config import DEFAULT_ALLOWED_ORIGINS, Settings
from surmise.util.error import ConfigurationError


def test_allowed_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv(
        "ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com"
    )

    settings = Settings()

    assert settings.allowed_origins == [
        "https://a.example.com",
        "https://b.example.com",
    ]


def test_allowed_origins_from_json_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", '["https://a.example.com"]')

    assert Settings().allowed_origins == ["https://a.example.com"]


def test_allowed_origins_default(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

    assert Settings().allowed_origins == DEFAULT_ALLOWED_ORIGINS


def test_production_cookies_are_cross_site(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings()

    assert settings.auth.cookie_secure is True
    assert settings.auth.cookie_samesite == "none"


def test_development_cookies_are_lax(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "development")

    settings = Settings()

    assert settings.auth.cookie_secure is False
    assert settings.auth.cookie_samesite == "lax"


def test_production_requires_jwt_secret(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("AUTH__JWT_SECRET", raising=False)

    with pytest.raises(ConfigurationError):
        Settings()
