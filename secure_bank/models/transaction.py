"""
Transaction Models for Secure Bank

Every deposit and withdrawal returns a TransactionResult instead of
raising. The result carries both the machine-readable outcome and the
human-readable message, so callers can test the outcome and still show
the user exactly the text the account produced.

DESIGN DECISION: Amounts are Decimal end to end. The account never
stores floats, so "1000 + 200 - 300" is exactly 900.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """Kinds of balance-changing operations."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class TransactionOutcome(str, Enum):
    """
    How a transaction ended.

    Only COMPLETED changes the balance and notifies listeners.
    POLICY_REJECTED is not an error kind: it is a secure account
    declining a withdrawal the base account would have allowed.
    """
    COMPLETED = "completed"
    NEGATIVE_DEPOSIT = "negative_deposit"
    OVERDRAW = "overdraw"
    ACCOUNT_INACTIVE = "account_inactive"
    POLICY_REJECTED = "policy_rejected"


# =============================================================================
# RESULT MODELS
# =============================================================================

class TransactionResult(BaseModel):
    """
    Outcome of a single deposit or withdrawal.

    str(result) is the user-visible text: the notification message for a
    completed transaction, the diagnostic otherwise.
    """

    transaction_id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction identifier"
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        description="When the transaction was attempted (UTC)"
    )
    account_number: str = Field(
        ...,
        description="Account the transaction was attempted on"
    )
    transaction_type: TransactionType
    outcome: TransactionOutcome
    amount: Decimal = Field(
        ...,
        description="Requested amount, exactly as received"
    )
    balance: Decimal = Field(
        ...,
        description="Account balance after the attempt"
    )
    message: str = Field(
        ...,
        description="Notification text or diagnostic"
    )

    @property
    def succeeded(self) -> bool:
        """Did the transaction change the balance?"""
        return self.outcome == TransactionOutcome.COMPLETED

    def __str__(self) -> str:
        return self.message


class SessionReport(BaseModel):
    """
    Everything that happened in one scripted transaction session.

    Mirrors the fixed driver sequence: open, deposit, withdraw, report.
    """

    account_number: str
    initial_balance: Decimal
    deposit: TransactionResult
    withdrawal: TransactionResult
    final_balance: Decimal
    notifications: list[str] = Field(
        default_factory=list,
        description="Messages received by the session's transaction logger, in order"
    )
    withdrawal_limit: Optional[Decimal] = Field(
        default=None,
        description="Per-transaction cap the secure account enforced"
    )
