"""
Settings for the typedenv command-line tool, using Pydantic Settings.

Read from TYPEDENV_* environment variables only; no .env file is loaded.
"""

from functools import lru_cache
from typing import Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """CLI settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TYPEDENV_",
        extra="ignore",
    )

    # Logging
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
