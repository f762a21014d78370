from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from the working directory without clobbering real environment
ENV_FILE_NAME = ".env"
env_path = Path.cwd() / ENV_FILE_NAME
load_dotenv(env_path)


def _blank_to_none(v: Any) -> Optional[str]:
    if v is None:
        return None
    text = str(v).strip()
    return text or None


class TranslationConfig(BaseModel):
    """Locale settings consulted by translatable models."""

    model_config = ConfigDict(frozen=True)

    locale: str = "en"
    fallback_locale: Optional[str] = None
    translatable_fallback_locale: Optional[str] = None

    @field_validator("fallback_locale", "translatable_fallback_locale", mode="before")
    @classmethod
    def _normalize_optional_locale(cls, v):
        return _blank_to_none(v)

    @field_validator("locale", mode="before")
    @classmethod
    def _normalize_locale(cls, v):
        return _blank_to_none(v) or "en"

    def get(self, key: str) -> Optional[str]:
        keys = {
            "app.locale": self.locale,
            "app.fallback_locale": self.fallback_locale,
            "translatable.fallback_locale": self.translatable_fallback_locale,
        }
        return keys.get(key)


class Settings(BaseSettings):
    APP_LOCALE: str = "en"
    APP_FALLBACK_LOCALE: Optional[str] = None
    TRANSLATABLE_FALLBACK_LOCALE: Optional[str] = None
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/translatable.db"

    @field_validator("APP_FALLBACK_LOCALE", "TRANSLATABLE_FALLBACK_LOCALE", mode="before")
    @classmethod
    def _blank_fallbacks(cls, v):  # type: ignore
        return _blank_to_none(v)

    @field_validator("APP_LOCALE", mode="before")
    @classmethod
    def _default_locale(cls, v):  # type: ignore
        return _blank_to_none(v) or "en"

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def translation_config(self) -> TranslationConfig:
        return TranslationConfig(
            locale=self.APP_LOCALE,
            fallback_locale=self.APP_FALLBACK_LOCALE,
            translatable_fallback_locale=self.TRANSLATABLE_FALLBACK_LOCALE,
        )


settings = Settings()


def default_translation_config() -> TranslationConfig:
    return settings.translation_config()
