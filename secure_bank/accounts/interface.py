"""
Abstract Account Interface

DESIGN DECISION: Both the plain account and its decorators implement the
same interface. A caller holding an AccountInterface cannot tell whether
extra policy is layered on, and decorators can wrap other decorators.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from secure_bank.accounts.amounts import AmountLike
from secure_bank.models.transaction import TransactionResult
from secure_bank.notifications import Listener


class AccountInterface(ABC):
    """
    Operations every account exposes.
    """

    @property
    @abstractmethod
    def account_number(self) -> str:
        """Opaque identifier, fixed at creation."""
        pass

    @property
    @abstractmethod
    def balance(self) -> Decimal:
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        pass

    @abstractmethod
    def deposit(self, amount: AmountLike) -> TransactionResult:
        """
        Add money to the account.

        Returns:
            A COMPLETED result, or NEGATIVE_DEPOSIT if amount < 0
        """
        pass

    @abstractmethod
    def withdraw(self, amount: AmountLike) -> TransactionResult:
        """
        Take money out of the account.

        Returns:
            A COMPLETED result, or the outcome of the first failed check
        """
        pass

    @abstractmethod
    def ensure_can_withdraw(self, amount: AmountLike) -> None:
        """
        Run the base withdrawal checks without changing anything.

        Raises:
            OverdrawError: amount exceeds the balance (checked first)
            InvalidAccountOperationError: account is closed
        """
        pass

    @abstractmethod
    def get_balance(self) -> Decimal:
        pass

    @abstractmethod
    def close(self) -> None:
        """Mark the account closed. Closing twice has no further effect."""
        pass

    @abstractmethod
    def attach(self, listener: Listener) -> None:
        pass

    @abstractmethod
    def detach(self, listener: Listener) -> None:
        pass
