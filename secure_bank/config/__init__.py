"""Configuration package."""

from secure_bank.config.settings import (
    AccountSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AccountSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
