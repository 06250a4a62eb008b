"""Tests for configuration loading."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from secure_bank.config import AccountSettings, LoggingSettings, get_settings


class TestAccountSettings:
    """Tests for AccountSettings."""

    def test_defaults(self):
        """Test defaults match the standard teller session."""
        settings = AccountSettings()
        assert settings.default_account_number == "123456"
        assert settings.withdrawal_limit == Decimal("500")

    def test_environment_override(self, monkeypatch):
        """Test BANK_ variables override defaults."""
        monkeypatch.setenv("BANK_WITHDRAWAL_LIMIT", "750.25")
        monkeypatch.setenv("BANK_DEFAULT_ACCOUNT_NUMBER", "ACC-9")

        settings = AccountSettings()
        assert settings.withdrawal_limit == Decimal("750.25")
        assert settings.default_account_number == "ACC-9"

    def test_limit_must_be_positive(self, monkeypatch):
        """Test a zero cap is rejected at load time."""
        monkeypatch.setenv("BANK_WITHDRAWAL_LIMIT", "0")
        with pytest.raises(ValidationError):
            AccountSettings()


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_defaults(self):
        """Test JSON logging at INFO by default."""
        settings = LoggingSettings()
        assert settings.level == "INFO"
        assert settings.json_output is True

    def test_level_normalised(self, monkeypatch):
        """Test level names are case-insensitive."""
        monkeypatch.setenv("BANK_LOG_LEVEL", "debug")
        assert LoggingSettings().level == "DEBUG"

    def test_unknown_level_rejected(self):
        """Test unknown levels fail validation."""
        with pytest.raises(ValidationError, match="Unsupported log level"):
            LoggingSettings(level="chatty")


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached(self):
        """Test the same object is returned until the cache is cleared."""
        first = get_settings()
        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings() is not first

    def test_sub_settings_read_environment(self, monkeypatch):
        """Test sub-settings reflect the environment at access time."""
        settings = get_settings()
        monkeypatch.setenv("BANK_WITHDRAWAL_LIMIT", "42")
        assert settings.account.withdrawal_limit == Decimal("42")
