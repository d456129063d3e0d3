"""
Test suite for configuration settings.

System role: Verification of environment-driven configuration
"""

import pytest
from pydantic import ValidationError

from concierge.configs.base import BaseSettings
from concierge.configs.chat import ChatSettings
from concierge.configs.database import DatabaseSettings


class TestBaseSettings:
    """Test suite for shared settings fields."""

    def test_log_level_should_be_normalised_to_upper_case(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert BaseSettings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_should_be_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            BaseSettings(_env_file=None)


class TestDatabaseSettings:
    """Test suite for DatabaseSettings.async_database_url."""

    def test_should_build_asyncpg_url_from_fields(self, monkeypatch) -> None:
        monkeypatch.delenv("POSTGRES_URL", raising=False)
        monkeypatch.setenv("POSTGRES_HOST", "db.internal")
        monkeypatch.setenv("POSTGRES_DB", "lending")

        url = DatabaseSettings(_env_file=None).async_database_url

        assert url.startswith("postgresql+asyncpg://")
        assert "@db.internal:5432/lending" in url

    def test_url_override_should_be_used_verbatim(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_URL", "sqlite+aiosqlite:///./concierge.db")

        assert DatabaseSettings(_env_file=None).async_database_url == "sqlite+aiosqlite:///./concierge.db"


class TestChatSettings:
    """Test suite for ChatSettings defaults."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("CHAT_GOOGLE_API_KEY", "CHAT_MODEL_ID", "CHAT_RECENT_WINDOW"):
            monkeypatch.delenv(name, raising=False)

        settings = ChatSettings(_env_file=None)

        assert settings.google_api_key is None
        assert settings.model_id == "gemini-2.0-flash"
        assert settings.recent_window == 12
