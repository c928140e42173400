"""Localization configuration settings."""

import json
from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class LocalizationSettings(BaseSettings):
    """Localization configuration settings.

    Environment Variables:
        LOCALIZATION_DEFAULT_LANGUAGE: Language used for flat `key: "text"`
            YAML entries and for `*` in Accept-Language (default: en)
        LOCALIZATION_LANGUAGES: Languages to register, JSON list or
            comma separated string (default: en)
        LOCALIZATION_STRICT_USAGE: Disable cross-language fallback on lookups
        LOCALIZATION_TRANSLATIONS_PATTERN: Glob pattern of YAML translation files
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        PREFIX: Environment prefix, empty in production

    Example:
        ```python
        from localization.config import settings

        registry = LocaleRegistry(*settings.languages, strict_usage=settings.strict_usage)
        ```
    """

    default_language: str = Field(
        default="en",
        alias="LOCALIZATION_DEFAULT_LANGUAGE",
        description="Default language for flat YAML values and wildcard matches",
    )
    languages: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["en"],
        alias="LOCALIZATION_LANGUAGES",
        description="Languages registered at startup, in priority order",
    )
    strict_usage: bool = Field(
        default=False,
        alias="LOCALIZATION_STRICT_USAGE",
        description="Restrict lookups to the requested language",
    )
    translations_pattern: str = Field(
        default="",
        alias="LOCALIZATION_TRANSLATIONS_PATTERN",
        description="Glob pattern for YAML translation files (e.g. locales/**/*.yml)",
    )

    LOG_LEVEL: str = "INFO"
    PREFIX: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("languages", mode="before")
    @classmethod
    def _split_languages(cls, value: Any) -> Any:
        """Accept a JSON list or a comma separated string."""
        if not isinstance(value, str):
            return value
        value = value.strip()
        if value.startswith("["):
            return json.loads(value)
        return [part.strip() for part in value.split(",") if part.strip()]

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)


settings = LocalizationSettings()
