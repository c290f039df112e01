"""Startup configuration rules: dev defaults allowed, production fails fast."""

import pytest
from pydantic import ValidationError

from config import INSECURE_JWT_SECRET, Settings

STRONG_SECRET = "x" * 40


def test_development_defaults():
    settings = Settings(_env_file=None, app_env="development")
    assert settings.jwt_secret_key == INSECURE_JWT_SECRET
    assert settings.database_url.startswith("mongodb://")
    assert settings.port == 3000
    assert settings.open_admin_promotion is False


def test_production_rejects_insecure_secret():
    with pytest.raises(ValidationError, match="JWT_SECRET_KEY is required"):
        Settings(_env_file=None, app_env="production", jwt_secret_key=INSECURE_JWT_SECRET)


def test_production_rejects_short_secret():
    with pytest.raises(ValidationError, match="at least 32 characters"):
        Settings(_env_file=None, app_env="production", jwt_secret_key="short-secret")


def test_production_rejects_open_admin_promotion():
    with pytest.raises(ValidationError, match="OPEN_ADMIN_PROMOTION"):
        Settings(_env_file=None, app_env="production", jwt_secret_key=STRONG_SECRET, open_admin_promotion=True)


def test_production_accepts_strong_secret():
    settings = Settings(_env_file=None, app_env="production", jwt_secret_key=STRONG_SECRET)
    assert settings.is_production


def test_legacy_env_names(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("DB_NAME", "dealer")
    monkeypatch.setenv("JWT_SECRET", STRONG_SECRET)
    settings = Settings(_env_file=None)
    assert settings.database_url == "mongodb://db.internal:27017"
    assert settings.database_name == "dealer"
    assert settings.jwt_secret_key == STRONG_SECRET


def test_settings_are_frozen():
    settings = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        settings.port = 8080


def test_empty_secret_falls_back_and_fails_in_production():
    assert Settings(_env_file=None, jwt_secret_key="").jwt_secret_key == INSECURE_JWT_SECRET
    with pytest.raises(ValidationError):
        Settings(_env_file=None, app_env="production", jwt_secret_key="")
