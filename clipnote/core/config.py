"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from clipnote.core.constants import DEFAULT_GEMINI_BASE_URL, DEFAULT_GEMINI_MODEL


class Settings(BaseSettings):
    """
    Configuration loaded from environment variables.

    Read once at startup and never mutated. The API key is optional: an empty
    key is passed through and rejected by the API itself.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # ---------------------------------------------------------------------------
    # Gemini
    # ---------------------------------------------------------------------------
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "VITE_GEMINI_API_KEY"),
    )
    gemini_model: str = Field(default=DEFAULT_GEMINI_MODEL, validation_alias="GEMINI_MODEL")
    gemini_base_url: str = Field(default=DEFAULT_GEMINI_BASE_URL, validation_alias="GEMINI_BASE_URL")

    # ---------------------------------------------------------------------------
    # Environment config (optional)
    # ---------------------------------------------------------------------------
    app_env: str = Field(default="local", validation_alias="APP_ENV")

    # ---------------------------------------------------------------------------
    # Deployment config (optional)
    # ---------------------------------------------------------------------------
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=list, validation_alias="CORS_ALLOW_ORIGINS"
    )
    max_request_bytes: int = Field(default=1_048_576, validation_alias="MAX_REQUEST_BYTES")  # 0 = disabled
    max_pages: int = Field(default=1000, validation_alias="MAX_PAGES")  # open pages kept in memory

    @field_validator("gemini_api_key", "gemini_model", "gemini_base_url", "app_env", mode="before")
    @classmethod
    def _strip_strings(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _parse_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
            return [item for item in items if item]
        return value

    @field_validator("max_request_bytes", mode="before")
    @classmethod
    def _clamp_request_bytes(cls, value: object) -> object:
        if isinstance(value, int):
            return max(0, value)
        return value

    @field_validator("max_pages", mode="before")
    @classmethod
    def _clamp_pages(cls, value: object) -> object:
        if isinstance(value, int):
            return max(1, value)
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
