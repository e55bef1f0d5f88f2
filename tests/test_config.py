from pathlib import Path

import pytest
from pydantic import ValidationError

from bgfill_service.config import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("REMOVEBG_API_KEY")
    monkeypatch.delenv("ASSETS_DIR")
    settings = Settings()

    assert settings.removebg_api_key is None
    assert settings.removebg_api_url == "https://api.remove.bg/v1.0/removebg"
    assert settings.assets_dir == Path("public/assets")
    assert settings.project_types == ["base", "send", "enb"]
    assert settings.default_background == "background1.png"
    assert settings.port == 5000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PROJECT_TYPES", '["alpha", "beta"]')
    monkeypatch.setenv("DEFAULT_PROJECT_TYPE", "beta")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.project_types == ["alpha", "beta"]
    assert settings.default_project_type == "beta"
    assert settings.log_level == "DEBUG"


def test_default_project_type_must_be_known(monkeypatch):
    monkeypatch.setenv("DEFAULT_PROJECT_TYPE", "other")
    with pytest.raises(ValidationError):
        Settings()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
