"""Application settings loaded from the environment."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings for wiring and logging; variables use the PAYMENTS_SETTLEMENT_ prefix."""

    app_name: str = Field(default="payments-settlement", description="Application name")
    app_env: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON (else console)")
    tokenize_cards: bool = Field(
        default=False,
        description="Store a vault token instead of the card number on settled payments",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTS_SETTLEMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level. Must be one of: {list(VALID_LOG_LEVELS)}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
