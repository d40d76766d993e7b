from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Event Platform API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./event_platform.db"
    database_echo: bool = False
    database_pool_size: int = 5          # ignored for SQLite
    database_max_overflow: int = 10
    cors_origins: list[str] = ["http://localhost:3000"]

    # Authentication
    jwt_secret_key: str = "change-me-in-production-with-a-long-random-value"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24
    bcrypt_rounds: int = 12
    password_reset_token_expire_minutes: int = 60

    # File upload & storage
    upload_dir: str = "uploads"
    files_base_url: str = "/files"
    max_upload_size_mb: int = 5

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_auth: str = "INFO"             # login, tokens, password flows
    log_level_storage: str = "INFO"          # object storage and email adapters

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance, reads .env once."""
    return Settings()
