"""Tests for settings."""

import pytest

from canvas_studio.core.config import Settings, get_settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    for name in ("STUDIO_MAX_HISTORY_SIZE", "STUDIO_CACHE_SIZE", "STUDIO_EXPORT_PRESET"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.max_history_size == 50
    assert settings.export_preset == "plain"
    assert settings.indent_width is None
    assert settings.cache_size == 32


@pytest.mark.unit
def test_env_prefix(monkeypatch):
    monkeypatch.setenv("STUDIO_MAX_HISTORY_SIZE", "5")
    monkeypatch.setenv("STUDIO_JSON_LOGS", "true")
    settings = Settings(_env_file=None)
    assert settings.max_history_size == 5
    assert settings.json_logs is True


@pytest.mark.unit
def test_rejects_non_positive_history(monkeypatch):
    monkeypatch.setenv("STUDIO_MAX_HISTORY_SIZE", "0")
    with pytest.raises(Exception):
        Settings(_env_file=None)


@pytest.mark.unit
def test_get_settings_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
