"""Settings — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from quotes_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("QUOTES_PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.log_format == "json"
    assert settings.cors_origins == []


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("QUOTES_PORT", "9090")
    monkeypatch.setenv("QUOTES_LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.port == 9090
    assert settings.log_format == "text"


def test_invalid_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
