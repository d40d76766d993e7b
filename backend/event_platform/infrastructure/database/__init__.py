from .base import Base
from .session import (
    async_session_factory,
    build_engine,
    build_session_factory,
    create_tables,
    engine,
    get_db_session,
)

__all__ = [
    "Base",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "engine",
    "get_db_session",
]
