"""
Account Errors

Each error carries the diagnostic shown to the user and the outcome code
reported in the TransactionResult. Accounts raise these internally and
convert them to results; they do not reach the caller.
"""

from typing import Optional

from secure_bank.models.transaction import TransactionOutcome


class AccountError(Exception):
    """Base exception for rejected account operations."""

    default_message = "Account operation failed."
    outcome: TransactionOutcome

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class NegativeDepositError(AccountError):
    """Deposit amount below zero."""

    default_message = "Cannot make a negative deposit! Please enter a positive amount."
    outcome = TransactionOutcome.NEGATIVE_DEPOSIT


class OverdrawError(AccountError):
    """Withdrawal amount exceeds the current balance."""

    default_message = (
        "Withdrawal amount exceeds account balance! "
        "Please try again with a smaller amount."
    )
    outcome = TransactionOutcome.OVERDRAW


class InvalidAccountOperationError(AccountError):
    """Operation attempted on a closed account."""

    default_message = "Account is not active."
    outcome = TransactionOutcome.ACCOUNT_INACTIVE


class InvalidAmountError(ValueError):
    """Value cannot be used as a monetary amount."""
    pass
