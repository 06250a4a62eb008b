"""
Tests for the account decorators.

SecureBankAccount must apply the base rules first, then its own cap,
and every change must land on the wrapped account.
"""

from decimal import Decimal

import pytest

from secure_bank.accounts import (
    AccountInterface,
    BankAccount,
    BankAccountDecorator,
    SecureBankAccount,
)
from secure_bank.models import TransactionOutcome


POLICY_MESSAGE = (
    "Cannot withdraw >500 dollars in one transaction! "
    "Please try again with a smaller amount."
)


class TestSecureWithdraw:
    """Tests for SecureBankAccount.withdraw."""

    @pytest.mark.parametrize("amount", ["0", "0.01", "300", "499.99", "500"])
    def test_withdrawal_within_cap(self, secure_account, recorder, amount):
        """Test withdrawals up to the cap succeed with one notification."""
        result = secure_account.withdraw(amount)

        assert result.succeeded is True
        assert secure_account.get_balance() == Decimal("1000") - Decimal(amount)
        assert len(recorder.messages) == 1

    @pytest.mark.parametrize("amount", ["500.01", "600", "1000"])
    def test_withdrawal_above_cap_rejected(self, secure_account, recorder, amount):
        """Test withdrawals over the cap change nothing and notify nobody."""
        result = secure_account.withdraw(amount)

        assert result.outcome == TransactionOutcome.POLICY_REJECTED
        assert result.message == POLICY_MESSAGE
        assert result.balance == Decimal("1000")
        assert secure_account.get_balance() == Decimal("1000")
        assert recorder.messages == []

    def test_overdraw_reported_before_cap(self, secure_account, recorder):
        """Test an amount over both balance and cap is an overdraw."""
        result = secure_account.withdraw(1500)
        assert result.outcome == TransactionOutcome.OVERDRAW
        assert recorder.messages == []

    def test_closed_reported_before_cap(self, secure_account):
        """Test a closed account reports inactive even above the cap."""
        secure_account.close()
        result = secure_account.withdraw(600)
        assert result.outcome == TransactionOutcome.ACCOUNT_INACTIVE
        assert result.message == "Account is not active."

    def test_closed_account_within_cap(self, secure_account):
        """Test the base status check still applies through the wrapper."""
        secure_account.close()
        result = secure_account.withdraw(100)
        assert result.outcome == TransactionOutcome.ACCOUNT_INACTIVE
        assert secure_account.get_balance() == Decimal("1000")

    def test_notification_goes_through_base_channel(self, account, secure_account, recorder):
        """Test listeners attached to the base account hear secure withdrawals."""
        secure_account.withdraw(300)
        assert recorder.messages == ["Transaction made: -300.0"]
        assert account.listeners == (recorder,)

    def test_custom_limit(self, account):
        """Test a non-default cap and its message."""
        secure = SecureBankAccount(account, withdrawal_limit="250.5")

        assert secure.withdrawal_limit == Decimal("250.5")
        rejected = secure.withdraw(251)
        assert rejected.outcome == TransactionOutcome.POLICY_REJECTED
        assert rejected.message.startswith("Cannot withdraw >250.5 dollars")
        assert secure.withdraw("250.5").succeeded is True

    def test_limit_defaults_to_settings(self, account, monkeypatch):
        """Test the cap comes from BANK_WITHDRAWAL_LIMIT when not given."""
        assert SecureBankAccount(account).withdrawal_limit == Decimal("500")

        monkeypatch.setenv("BANK_WITHDRAWAL_LIMIT", "100")
        assert SecureBankAccount(account).withdrawal_limit == Decimal("100")

    def test_non_positive_limit_rejected(self, account):
        """Test a zero cap is refused."""
        with pytest.raises(ValueError, match="must be positive"):
            SecureBankAccount(account, withdrawal_limit=0)


class TestDelegation:
    """Tests that decorators share state with the wrapped account."""

    def test_deposit_through_wrapper_updates_base(self, account, secure_account):
        """Test wrapper deposits land on the wrapped account."""
        secure_account.deposit(200)
        assert account.get_balance() == Decimal("1200")
        assert secure_account.get_balance() == Decimal("1200")

    def test_base_changes_visible_through_wrapper(self, account, secure_account):
        """Test there is a single balance."""
        account.withdraw(100)
        assert secure_account.get_balance() == Decimal("900")
        assert secure_account.balance == Decimal("900")

    def test_closing_base_closes_wrapper(self, account, secure_account):
        """Test status is shared."""
        account.close()
        assert secure_account.is_active is False
        assert secure_account.withdraw(10).outcome == TransactionOutcome.ACCOUNT_INACTIVE

    def test_attach_through_wrapper(self, account, secure_account):
        """Test listeners attached via the wrapper live on the base account."""
        heard = []
        secure_account.attach(heard.append)
        account.deposit(1)
        assert heard == ["Transaction made: +1.0"]

        secure_account.detach(heard.append)
        account.deposit(1)
        assert heard == ["Transaction made: +1.0"]

    def test_identity_forwarded(self, account, secure_account):
        """Test account number and wrapped reference."""
        assert secure_account.account_number == account.account_number
        assert secure_account.wrapped is account
        assert isinstance(secure_account, AccountInterface)
        assert "SecureBankAccount" in repr(secure_account)

    def test_plain_decorator_forwards_withdraw(self, account):
        """Test the base decorator adds no policy."""
        plain = BankAccountDecorator(account)
        assert plain.withdraw(900).succeeded is True
        assert account.get_balance() == Decimal("100")

    def test_stacked_secure_accounts(self, account):
        """Test the tighter of two stacked caps wins."""
        inner = SecureBankAccount(account, withdrawal_limit=500)
        outer = SecureBankAccount(inner, withdrawal_limit=200)

        assert outer.withdraw(300).outcome == TransactionOutcome.POLICY_REJECTED
        assert inner.withdraw(300).succeeded is True
        assert outer.withdraw(200).succeeded is True
        assert account.get_balance() == Decimal("500")


class TestEndToEnd:
    """The canonical scenario from account opening to capped withdrawal."""

    def test_deposit_wrap_and_withdraw(self, audit_logger, recorder):
        """Test 1000 -> +200 -> wrap -> 600 refused -> 300 taken."""
        account = BankAccount("123456", 1000, audit_logger=audit_logger)
        account.attach(recorder)

        deposit = account.deposit(200)
        assert deposit.succeeded is True
        assert account.get_balance() == Decimal("1200")
        assert recorder.messages == ["Transaction made: +200.0"]

        secure = SecureBankAccount(account)
        recorder.clear()

        refused = secure.withdraw(600)
        assert refused.outcome == TransactionOutcome.POLICY_REJECTED
        assert secure.get_balance() == Decimal("1200")
        assert recorder.messages == []

        taken = secure.withdraw(300)
        assert taken.succeeded is True
        assert secure.get_balance() == Decimal("900")
        assert account.get_balance() == Decimal("900")
        assert recorder.messages == ["Transaction made: -300.0"]


def test_bank_account_is_an_account_interface():
    """Test both account kinds share the interface."""
    assert issubclass(BankAccount, AccountInterface)
    assert issubclass(SecureBankAccount, AccountInterface)
