"""Accounts package."""

from secure_bank.accounts.account import BankAccount
from secure_bank.accounts.amounts import format_amount, to_amount
from secure_bank.accounts.errors import (
    AccountError,
    InvalidAccountOperationError,
    InvalidAmountError,
    NegativeDepositError,
    OverdrawError,
)
from secure_bank.accounts.interface import AccountInterface
from secure_bank.accounts.secure import BankAccountDecorator, SecureBankAccount

__all__ = [
    # Accounts
    "AccountInterface",
    "BankAccount",
    "BankAccountDecorator",
    "SecureBankAccount",
    # Exceptions
    "AccountError",
    "InvalidAccountOperationError",
    "InvalidAmountError",
    "NegativeDepositError",
    "OverdrawError",
    # Amounts
    "format_amount",
    "to_amount",
]
