from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__ = (
    "Settings",

    "get_settings"
)


LOG_FORMATS = ("text", "json")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PRIMESTORE_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    # Application
    initial_count: int = 0

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return str(value).upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        value = str(value).lower()

        if value not in LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {', '.join(LOG_FORMATS)}"
            )

        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
