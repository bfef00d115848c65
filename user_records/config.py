"""
Configuration settings for the user records CLI.

Uses Pydantic Settings to load environment variables for logging and the
permission bits applied when the storage file has to be created.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Storage
    storage_file_mode: str = Field("644", alias="STORAGE_FILE_MODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("storage_file_mode")
    @classmethod
    def _octal_mode(cls, value: str) -> str:
        try:
            mode = int(value, 8)
        except ValueError as exc:
            raise ValueError(f"STORAGE_FILE_MODE must be an octal string, got {value!r}") from exc
        if not 0 <= mode <= 0o777:
            raise ValueError(f"STORAGE_FILE_MODE out of range: {value!r}")
        return value

    @property
    def file_mode(self) -> int:
        """Permission bits for a newly created storage file."""
        return int(self.storage_file_mode, 8)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
