"""
Transaction Session

Ties the components together in the fixed order a teller session uses:
1. Open an account with the initial balance
2. Attach a transaction logger
3. Wrap the account in a SecureBankAccount
4. Deposit, then withdraw, through the secure account
5. Report the final balance

The session does no prompting or parsing. Amounts arrive already numeric
and every outcome, including rejections, comes back in the SessionReport.
"""

from typing import Iterable, Optional, TextIO

from secure_bank.accounts import BankAccount, SecureBankAccount
from secure_bank.accounts.amounts import AmountLike, to_amount
from secure_bank.audit import AuditLogger
from secure_bank.config import Settings, get_settings
from secure_bank.models.transaction import SessionReport
from secure_bank.notifications import Listener, TransactionLogger


def open_secure_account(
    initial_balance: AmountLike,
    account_number: Optional[str] = None,
    listeners: Iterable[Listener] = (),
    settings: Optional[Settings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> SecureBankAccount:
    """
    Create an account, attach listeners, and wrap it with the withdrawal cap.

    Listeners are attached to the base account before wrapping, in the
    order given.
    """
    settings = settings or get_settings()
    account_settings = settings.account

    account = BankAccount(
        account_number or account_settings.default_account_number,
        initial_balance,
        audit_logger=audit_logger,
    )
    for listener in listeners:
        account.attach(listener)

    return SecureBankAccount(
        account,
        withdrawal_limit=account_settings.withdrawal_limit,
    )


def run_transaction_session(
    initial_balance: AmountLike,
    deposit_amount: AmountLike,
    withdrawal_amount: AmountLike,
    *,
    account_number: Optional[str] = None,
    stream: Optional[TextIO] = None,
    settings: Optional[Settings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> SessionReport:
    """
    Run one deposit and one withdrawal against a fresh secure account.

    Args:
        initial_balance: Opening balance (not checked for sign)
        deposit_amount: Amount to deposit
        withdrawal_amount: Amount to withdraw
        account_number: Defaults to the configured default_account_number
        stream: Where the transaction logger prints (stdout if None)

    Returns:
        SessionReport with both transaction results and the final balance
    """
    transaction_logger = TransactionLogger(stream)
    secure_account = open_secure_account(
        initial_balance,
        account_number=account_number,
        listeners=[transaction_logger],
        settings=settings,
        audit_logger=audit_logger,
    )

    deposit = secure_account.deposit(deposit_amount)
    withdrawal = secure_account.withdraw(withdrawal_amount)

    return SessionReport(
        account_number=secure_account.account_number,
        initial_balance=to_amount(initial_balance),
        deposit=deposit,
        withdrawal=withdrawal,
        final_balance=secure_account.get_balance(),
        notifications=list(transaction_logger.messages),
        withdrawal_limit=secure_account.withdrawal_limit,
    )
