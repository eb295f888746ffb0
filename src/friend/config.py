"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with FRIEND_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="FRIEND_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_name: str = "Friend App API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    log_level: str = "INFO"
    log_format: str = "json"

    # --- Database ---
    database_url: str = "sqlite+aiosqlite:///./data/friend.db"
    create_tables: bool = True

    # --- JWT ---
    jwt_secret: str = "your_jwt_secret_key_change_this"  # noqa: S105
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
