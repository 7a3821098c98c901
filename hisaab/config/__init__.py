"""Configuration package."""

from hisaab.config.settings import (
    AppSettings,
    InputSettings,
    SearchSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "InputSettings",
    "SearchSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
