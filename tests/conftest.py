"""Shared fixtures for Secure Bank tests."""

from decimal import Decimal

import pytest

from secure_bank.accounts import BankAccount, SecureBankAccount
from secure_bank.audit import AuditLogger
from secure_bank.config import get_settings
from secure_bank.notifications import TransactionRecorder


class FakeStructLogger:
    """Records log calls as (level, event, fields) tuples."""

    def __init__(self):
        self.calls = []

    def _record(self, level):
        def emit(event, **fields):
            self.calls.append((level, event, fields))
        return emit

    def __getattr__(self, level):
        if level in {"debug", "info", "warning", "error"}:
            return self._record(level)
        raise AttributeError(level)

    def event_types(self):
        return [fields["event_type"] for _, _, fields in self.calls]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from BANK_* variables and the settings cache."""
    for name in ("BANK_WITHDRAWAL_LIMIT", "BANK_DEFAULT_ACCOUNT_NUMBER",
                 "BANK_LOG_LEVEL", "BANK_LOG_JSON_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_logger():
    return FakeStructLogger()


@pytest.fixture
def audit_logger(fake_logger):
    return AuditLogger(logger=fake_logger)


@pytest.fixture
def recorder():
    return TransactionRecorder()


@pytest.fixture
def account(audit_logger, recorder):
    """Open account #123456 with 1000 and a recorder attached."""
    account = BankAccount("123456", Decimal("1000"), audit_logger=audit_logger)
    account.attach(recorder)
    return account


@pytest.fixture
def secure_account(account):
    return SecureBankAccount(account, withdrawal_limit=Decimal("500"))
