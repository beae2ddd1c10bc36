from __future__ import annotations

import pytest
from pydantic import ValidationError

from utilkit.config import Settings, get_settings


def _reload_with_env(monkeypatch, env: dict) -> Settings:
    for key, value in env.items():
        if value is None:
            monkeypatch.delenv(key, raising=False)
        else:
            monkeypatch.setenv(key, value)
    # Bust lru_cache so the new environment is read
    get_settings.cache_clear()
    return get_settings()


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = _reload_with_env(monkeypatch, {})
    assert s.LOG_LEVEL == "WARNING"
    assert s.MAP_ASYNC_CONCURRENCY == 8
    assert s.JSON_INDENT is None


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = _reload_with_env(
        monkeypatch,
        {
            "UTILKIT_LOG_LEVEL": "debug",
            "UTILKIT_MAP_ASYNC_CONCURRENCY": "3",
            "UTILKIT_JSON_INDENT": "2",
        },
    )
    assert s.LOG_LEVEL == "DEBUG"
    assert s.MAP_ASYNC_CONCURRENCY == 3
    assert s.JSON_INDENT == 2


def test_blank_log_level_falls_back(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    s = _reload_with_env(monkeypatch, {"UTILKIT_LOG_LEVEL": "  "})
    assert s.LOG_LEVEL == "WARNING"


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("UTILKIT_MAP_ASYNC_CONCURRENCY=5\nOTHER_TOOL_SETTING=x\n")
    s = _reload_with_env(monkeypatch, {})
    assert s.MAP_ASYNC_CONCURRENCY == 5


def test_invalid_values_rejected(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UTILKIT_MAP_ASYNC_CONCURRENCY", "0")
    with pytest.raises(ValidationError):
        Settings()
    monkeypatch.setenv("UTILKIT_MAP_ASYNC_CONCURRENCY", "4")
    monkeypatch.setenv("UTILKIT_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    first = _reload_with_env(monkeypatch, {})
    monkeypatch.setenv("UTILKIT_MAP_ASYNC_CONCURRENCY", "2")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().MAP_ASYNC_CONCURRENCY == 2
