"""
Account Decorators

A decorator adds policy to an existing account without modifying it.

DESIGN DECISION: Decorators hold a live reference to the wrapped
account and forward everything to it. There is one balance, one status
and one set of listeners, owned by the wrapped account. Transactions made
through the decorator and directly on the wrapped account are always
visible to each other.

SecureBankAccount caps a single withdrawal. Its checks run in this order:
1. amount > balance         -> overdraw (from the wrapped account)
2. account closed           -> not active (from the wrapped account)
3. amount > withdrawal cap  -> policy rejection, no change, no notification
"""

from decimal import Decimal
from typing import Optional

from secure_bank.accounts.amounts import AmountLike, format_limit, to_amount
from secure_bank.accounts.errors import AccountError
from secure_bank.accounts.interface import AccountInterface
from secure_bank.audit import AuditLogger
from secure_bank.config import get_settings
from secure_bank.models.transaction import (
    TransactionOutcome,
    TransactionResult,
    TransactionType,
)
from secure_bank.notifications import Listener


class BankAccountDecorator(AccountInterface):
    """
    Base decorator: forwards every operation to the wrapped account.

    Subclasses override only what their policy changes.
    """

    def __init__(
        self,
        account: AccountInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._account = account
        self._audit_logger = (
            audit_logger
            or getattr(account, "audit_logger", None)
            or AuditLogger()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._account!r})"

    @property
    def wrapped(self) -> AccountInterface:
        return self._account

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    @property
    def account_number(self) -> str:
        return self._account.account_number

    @property
    def balance(self) -> Decimal:
        return self._account.balance

    @property
    def is_active(self) -> bool:
        return self._account.is_active

    def deposit(self, amount: AmountLike) -> TransactionResult:
        return self._account.deposit(amount)

    def withdraw(self, amount: AmountLike) -> TransactionResult:
        return self._account.withdraw(amount)

    def ensure_can_withdraw(self, amount: AmountLike) -> None:
        self._account.ensure_can_withdraw(amount)

    def get_balance(self) -> Decimal:
        return self._account.get_balance()

    def close(self) -> None:
        self._account.close()

    def attach(self, listener: Listener) -> None:
        self._account.attach(listener)

    def detach(self, listener: Listener) -> None:
        self._account.detach(listener)


class SecureBankAccount(BankAccountDecorator):
    """
    Refuses any single withdrawal above a fixed cap.

    The cap defaults to the configured withdrawal_limit (500).
    """

    def __init__(
        self,
        account: AccountInterface,
        withdrawal_limit: Optional[AmountLike] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        super().__init__(account, audit_logger)
        if withdrawal_limit is None:
            withdrawal_limit = get_settings().account.withdrawal_limit
        self._withdrawal_limit = to_amount(withdrawal_limit)
        if self._withdrawal_limit <= 0:
            raise ValueError(f"Withdrawal limit must be positive, got {withdrawal_limit}")

        self._audit_logger.log_account_wrapped(
            self.account_number,
            type(self).__name__,
            {"withdrawal_limit": str(self._withdrawal_limit)},
        )

    @property
    def withdrawal_limit(self) -> Decimal:
        return self._withdrawal_limit

    def withdraw(self, amount: AmountLike) -> TransactionResult:
        amount = to_amount(amount)
        if self._passes_base_rules(amount) and amount > self._withdrawal_limit:
            return self._reject_by_policy(amount)

        # Base-rule rejections and successful withdrawals are both the wrapped account's to report
        return self._account.withdraw(amount)

    def _passes_base_rules(self, amount: Decimal) -> bool:
        try:
            self._account.ensure_can_withdraw(amount)
        except AccountError:
            return False
        return True

    def _reject_by_policy(self, amount: Decimal) -> TransactionResult:
        result = TransactionResult(
            account_number=self.account_number,
            transaction_type=TransactionType.WITHDRAWAL,
            outcome=TransactionOutcome.POLICY_REJECTED,
            amount=amount,
            balance=self.get_balance(),
            message=(
                f"Cannot withdraw >{format_limit(self._withdrawal_limit)} dollars "
                "in one transaction! Please try again with a smaller amount."
            ),
        )
        self._audit_logger.log_transaction(result)
        return result
