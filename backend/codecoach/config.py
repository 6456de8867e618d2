"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_env: str = "development"
    app_debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./codecoach.db"

    # Analysis limits
    max_code_length: int = 10000
    analysis_timeout_seconds: float = 5.0
    issue_display_limit: int = 10
    note_display_limit: int = 5

    # Identity used when the caller does not send X-User-Id
    default_user_id: str = "demo-user"

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    @field_validator("database_url", mode="after")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Ensure database URL is set."""
        if not v:
            raise ValueError("database_url must be set via DATABASE_URL environment variable")
        return v

    @field_validator(
        "max_code_length",
        "analysis_timeout_seconds",
        "issue_display_limit",
        "note_display_limit",
        mode="after",
    )
    @classmethod
    def validate_positive(cls, v, info):
        if v <= 0:
            raise ValueError(f"{info.field_name} must be greater than zero")
        return v

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
