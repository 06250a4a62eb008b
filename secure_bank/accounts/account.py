"""
Bank Account

The account is a two-state machine: OPEN -> CLOSED, one way, via close().

Rules:
- Deposits are rejected only for negative amounts. A closed account
  still accepts deposits.
- Withdrawals check the balance BEFORE the account status. Asking a
  closed account for more than its balance reports an overdraw, not a
  closed account.
- Rejections are returned as TransactionResults. They never raise and
  never notify listeners.
- Completed transactions notify every listener with
  "Transaction made: +<amount>" or "Transaction made: -<amount>".
"""

from decimal import Decimal
from typing import Optional

from secure_bank.accounts.amounts import AmountLike, format_amount, to_amount
from secure_bank.accounts.errors import (
    AccountError,
    InvalidAccountOperationError,
    NegativeDepositError,
    OverdrawError,
)
from secure_bank.accounts.interface import AccountInterface
from secure_bank.audit import AuditLogger
from secure_bank.models.transaction import (
    TransactionOutcome,
    TransactionResult,
    TransactionType,
)
from secure_bank.notifications import Listener, NotificationChannel, describe_listener


class BankAccount(AccountInterface):
    """
    A single bank account that notifies listeners of its transactions.

    The initial balance is taken as given; it is not checked for sign.
    """

    def __init__(
        self,
        account_number: str,
        initial_balance: AmountLike = 0,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._account_number = str(account_number)
        self._balance = to_amount(initial_balance)
        self._is_active = True
        self._channel = NotificationChannel()
        self._audit_logger = audit_logger or AuditLogger()

        self._audit_logger.log_account_opened(self._account_number, self._balance)

    def __repr__(self) -> str:
        state = "open" if self._is_active else "closed"
        return f"BankAccount(#{self._account_number}, balance={self._balance}, {state})"

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit_logger

    @property
    def listeners(self) -> tuple[Listener, ...]:
        """Attached listeners in delivery order."""
        return tuple(self._channel)

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def attach(self, listener: Listener) -> None:
        self._channel.attach(listener)
        self._audit_logger.log_listener_changed(
            self._account_number,
            describe_listener(listener),
            len(self._channel),
            attached=True,
        )

    def detach(self, listener: Listener) -> None:
        self._channel.detach(listener)
        self._audit_logger.log_listener_changed(
            self._account_number,
            describe_listener(listener),
            len(self._channel),
            attached=False,
        )

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def deposit(self, amount: AmountLike) -> TransactionResult:
        amount = to_amount(amount)
        try:
            if amount < 0:
                raise NegativeDepositError()
        except NegativeDepositError as e:
            return self._reject(TransactionType.DEPOSIT, amount, e)

        return self._complete(TransactionType.DEPOSIT, amount)

    def withdraw(self, amount: AmountLike) -> TransactionResult:
        amount = to_amount(amount)
        try:
            self.ensure_can_withdraw(amount)
        except (OverdrawError, InvalidAccountOperationError) as e:
            return self._reject(TransactionType.WITHDRAWAL, amount, e)

        return self._complete(TransactionType.WITHDRAWAL, amount)

    def ensure_can_withdraw(self, amount: AmountLike) -> None:
        amount = to_amount(amount)
        if amount > self._balance:
            raise OverdrawError()
        if not self._is_active:
            raise InvalidAccountOperationError()

    def get_balance(self) -> Decimal:
        return self._balance

    def close(self) -> None:
        was_active = self._is_active
        self._is_active = False
        self._audit_logger.log_account_closed(self._account_number, was_active)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _complete(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
    ) -> TransactionResult:
        """Apply a validated transaction, then notify listeners."""
        if transaction_type == TransactionType.DEPOSIT:
            self._balance += amount
            sign = "+"
        else:
            self._balance -= amount
            sign = "-"

        result = TransactionResult(
            account_number=self._account_number,
            transaction_type=transaction_type,
            outcome=TransactionOutcome.COMPLETED,
            amount=amount,
            balance=self._balance,
            message=f"Transaction made: {sign}{format_amount(amount)}",
        )
        self._audit_logger.log_transaction(result)
        self._channel.publish(result.message)
        return result

    def _reject(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        error: AccountError,
    ) -> TransactionResult:
        result = TransactionResult(
            account_number=self._account_number,
            transaction_type=transaction_type,
            outcome=error.outcome,
            amount=amount,
            balance=self._balance,
            message=str(error),
        )
        self._audit_logger.log_transaction(result)
        return result
