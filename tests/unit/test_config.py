"""Tests for Settings defaults and validation."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

import app.__main__ as app_main
from app.core.config import Settings, get_settings


def test_defaults_use_local_sqlite(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without env, the app targets a local SQLite file and keeps /task paths."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.is_sqlite
    assert settings.api_prefix == ""
    assert settings.database_auto_create is True
    assert (settings.host, settings.port) == ("127.0.0.1", 8000)


def test_env_overrides_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """DATABASE_URL from the environment wins over the default."""
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@localhost:5432/tasks")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@localhost:5432/tasks"
    assert not settings.is_sqlite


def test_empty_database_url_is_rejected() -> None:
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(_env_file=None, database_url="")


def test_non_positive_timeout_is_rejected() -> None:
    with pytest.raises(ValidationError, match="REQUEST_TIMEOUT_SECONDS"):
        Settings(_env_file=None, request_timeout_seconds=0)


def test_server_entry_point_runs_uvicorn_with_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """python -m app hands the app import path and host/port from settings to uvicorn."""
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    get_settings.cache_clear()
    run = MagicMock()
    monkeypatch.setattr(app_main.uvicorn, "run", run)
    try:
        app_main.main()
    finally:
        get_settings.cache_clear()

    run.assert_called_once_with("app.main:app", host="0.0.0.0", port=9001, reload=False)
