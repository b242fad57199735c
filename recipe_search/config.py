"""Runtime configuration based on environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MealDBSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://www.themealdb.com/api/json/v1/1/",
        description="Root of TheMealDB JSON API, version and key included.",
    )
    search_path: str = Field(default="search.php", min_length=1)
    request_timeout_seconds: float = Field(default=10, ge=1, le=60)

    def search_url(self) -> str:
        return f"{str(self.base_url).rstrip('/')}/{self.search_path.lstrip('/')}"


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECIPE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    default_language: str = "en"

    mealdb: MealDBSettings = Field(default_factory=MealDBSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        if isinstance(value, str):
            value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "MealDBSettings", "get_settings"]
