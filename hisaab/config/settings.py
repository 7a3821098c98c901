"""
Configuration Management for Hisaab

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The transliteration engine itself takes no configuration (its tables are
fixed); these settings only drive the layers around it - when typed input
is converted and how search terms are applied.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class InputSettings(BaseSettings):
    """Transliterated text input behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="HISAAB_INPUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    language: Literal["en", "hi"] = Field(
        default="en",
        description="Input language; 'hi' converts typed Roman text to Devanagari"
    )
    transliterate_on_space: bool = Field(
        default=True,
        description="Convert the field when the user types a space"
    )
    transliterate_on_blur: bool = Field(
        default=True,
        description="Convert the field when it loses focus"
    )


class SearchSettings(BaseSettings):
    """Bilingual record search configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HISAAB_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    min_term_length: int = Field(
        default=1,
        ge=0,
        le=50,
        description="Normalized terms shorter than this match every record"
    )
    max_results: int = Field(
        default=500,
        ge=1,
        le=10000,
        description="Maximum records returned by a single search"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def input(self) -> InputSettings:
        return InputSettings()

    @property
    def search(self) -> SearchSettings:
        return SearchSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the groups that failed.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    for name in ("input", "search", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
