"""Engine options chosen per database backend."""

from sqlalchemy.pool import StaticPool

from event_platform.config import Settings
from event_platform.infrastructure.database.session import _engine_options, _get_async_url


def test_sync_urls_get_async_drivers():
    assert _get_async_url("sqlite:///./events.db") == "sqlite+aiosqlite:///./events.db"
    assert _get_async_url("postgresql://u:p@db/events") == "postgresql+asyncpg://u:p@db/events"
    assert _get_async_url("postgresql+asyncpg://db/events") == "postgresql+asyncpg://db/events"


def test_in_memory_sqlite_shares_one_connection():
    options = _engine_options("sqlite+aiosqlite:///:memory:", Settings(_env_file=None))
    assert options["poolclass"] is StaticPool
    assert options["connect_args"] == {"check_same_thread": False}


def test_file_sqlite_keeps_default_pool():
    options = _engine_options("sqlite+aiosqlite:///./events.db", Settings(_env_file=None))
    assert "poolclass" not in options
    assert "pool_size" not in options


def test_postgresql_pool_comes_from_settings():
    settings = Settings(_env_file=None, database_pool_size=3, database_max_overflow=7)
    options = _engine_options("postgresql+asyncpg://db/events", settings)
    assert options == {"pool_size": 3, "max_overflow": 7, "pool_pre_ping": True}
