"""
Configuration Management for Secure Bank

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All tunable values are centralized here.
The per-transaction withdrawal cap in particular is a policy value,
so it is read from configuration instead of being hard-coded in the
secure account wrapper.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccountSettings(BaseSettings):
    """Account defaults and withdrawal policy."""

    model_config = SettingsConfigDict(
        env_prefix="BANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    default_account_number: str = Field(
        default="123456",
        min_length=1,
        description="Identifier used when a session does not supply one"
    )
    withdrawal_limit: Decimal = Field(
        default=Decimal("500"),
        gt=0,
        description="Largest amount a secure account allows in one withdrawal"
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BANK_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field(
        default="INFO",
        description="Minimum level for the secure_bank loggers"
    )
    json_output: bool = Field(
        default=True,
        description="Render log lines as JSON (False = human-readable console)"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
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
    def account(self) -> AccountSettings:
        return AccountSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
