"""Pydantic-backed configuration for the fact fetcher."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
DEFAULT_ENV_FILE = BASE_DIR / ".env"
DEFAULT_FACT_SOURCE_URL = "http://127.0.0.1:8000/funfact"


class AppSettings(BaseSettings):
    """Environment-driven configuration for the fact fetcher."""

    debug: bool = False
    fact_source_url: str = Field(
        default=DEFAULT_FACT_SOURCE_URL,
        validation_alias=AliasChoices("FACTFETCH_FACT_SOURCE_URL", "FACT_SOURCE_URL"),
    )
    display_delay_ms: int = Field(default=300, ge=0)
    timeout_seconds: float | None = Field(default=None, gt=0)
    posthog_project_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "POSTHOG_PROJECT_API_KEY",
            "FACTFETCH_POSTHOG_PROJECT_API_KEY",
        ),
    )
    posthog_host: str = Field(
        default="https://us.i.posthog.com",
        validation_alias=AliasChoices("POSTHOG_HOST", "FACTFETCH_POSTHOG_HOST"),
    )
    posthog_debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("POSTHOG_DEBUG", "FACTFETCH_POSTHOG_DEBUG"),
    )
    posthog_disabled: bool = Field(
        default=False,
        validation_alias=AliasChoices("POSTHOG_DISABLED", "FACTFETCH_POSTHOG_DISABLED"),
    )
    posthog_distinct_id: str = "factfetch-terminal"

    model_config = SettingsConfigDict(
        env_prefix="FACTFETCH_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("fact_source_url", mode="after")
    @classmethod
    def _require_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("fact_source_url must not be empty")
        return value

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def _blank_timeout(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def display_delay_seconds(self) -> float:
        return self.display_delay_ms / 1000


@lru_cache()
def get_settings(env_file: str | os.PathLike[str] | None = None) -> AppSettings:
    """Load settings from environment and optional .env file with caching."""

    kwargs: dict[str, Any] = {}
    env_file_path: Path | None = None

    if env_file:
        env_file_path = Path(env_file)
    elif os.getenv("FACTFETCH_ENV_FILE"):
        env_file_path = Path(os.environ["FACTFETCH_ENV_FILE"])
    elif DEFAULT_ENV_FILE.exists():
        env_file_path = DEFAULT_ENV_FILE

    if env_file_path is not None:
        kwargs["_env_file"] = env_file_path
        kwargs["_env_file_encoding"] = "utf-8"

    return AppSettings(**kwargs)


__all__ = [
    "AppSettings",
    "BASE_DIR",
    "DEFAULT_ENV_FILE",
    "DEFAULT_FACT_SOURCE_URL",
    "get_settings",
]
