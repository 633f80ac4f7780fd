"""Tests for env-driven settings and the cached access facade."""

import pytest

from jmapcontract.config import Settings, clear_settings_cache, get_settings, normalize_level


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.log_json is True


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("DEBUG", "DEBUG"),
        ("debug", "DEBUG"),
        ("WARN", "WARNING"),
        ("warning", "WARNING"),
        ("ERROR", "ERROR"),
        ("verbose", "INFO"),
        ("", "INFO"),
    ],
)
def test_log_level_from_env(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)
    assert Settings().log_level == expected


def test_log_json_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LOG_JSON", "false")
    assert Settings().log_json is False


def test_normalize_level_handles_none() -> None:
    assert normalize_level(None) == "INFO"
    assert normalize_level(" Error ") == "ERROR"


def test_get_settings_is_cached_until_reload(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    first = get_settings()
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert get_settings() is first
    assert get_settings().log_level == "ERROR"
    reloaded = get_settings(force_reload=True)
    assert reloaded.log_level == "DEBUG"


def test_clear_settings_cache_forces_fresh_read(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    first = get_settings()
    clear_settings_cache()
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    second = get_settings()
    assert second is not first
    assert second.log_level == "DEBUG"
    assert get_settings() is second
