"""Settings - environment parsing and URL normalization."""

from app.config import Settings, get_settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/users")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/users"


def test_async_url_left_alone():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "5")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.database_pool_size == 5


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
