"""Lingo configuration settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_DIR = Path(__file__).resolve().parents[1] / "locales"


class I18nSettings(BaseSettings):
    """Message catalog configuration settings."""

    CATALOG_DIR: Path = Field(default=DEFAULT_CATALOG_DIR, alias="I18N_CATALOG_DIR")
    CATALOG_BASENAME: Optional[str] = Field(
        default=None, alias="I18N_CATALOG_BASENAME"
    )
    DEFAULT_LANGUAGE: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")
    PRELOAD: bool = Field(default=True, alias="I18N_PRELOAD")

    @field_validator("CATALOG_BASENAME", mode="before")
    @classmethod
    def _empty_basename_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Lingo configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
