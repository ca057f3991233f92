"""Application configuration and environment variables."""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Book Inventory API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: LogLevel = "INFO"
    cors_origins: list[str] = ["*"]

    # Server (only used when running app.main directly)
    host: str = "0.0.0.0"
    port: int = 8000

    # Number of freshly generated ids POST /addBook tries before giving up
    insert_attempts: int = Field(default=1, ge=1)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
