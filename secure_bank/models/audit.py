"""
Audit Models for Secure Bank

Every account operation, successful or not, produces an audit event.
This gives:
1. Traceability of every balance change
2. A record of rejected operations (which never reach listeners)
3. Debugging information when a listener misbehaves

DESIGN DECISION: Audit events are logged, never stored. Keeping a
transaction history is out of scope; the structured log is the trail.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from secure_bank.models.transaction import (
    TransactionOutcome,
    TransactionResult,
    TransactionType,
    utc_now,
)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Lifecycle
    ACCOUNT_OPENED = "account_opened"
    ACCOUNT_CLOSED = "account_closed"
    ACCOUNT_WRAPPED = "account_wrapped"

    # Listeners
    LISTENER_ATTACHED = "listener_attached"
    LISTENER_DETACHED = "listener_detached"

    # Transactions
    DEPOSIT_COMPLETED = "deposit_completed"
    DEPOSIT_REJECTED = "deposit_rejected"
    WITHDRAWAL_COMPLETED = "withdrawal_completed"
    WITHDRAWAL_REJECTED = "withdrawal_rejected"
    WITHDRAWAL_POLICY_REJECTED = "withdrawal_policy_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )
    event_type: AuditEventType
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )
    account_number: str = Field(
        ...,
        description="Account this event relates to"
    )
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_code: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "account_number": self.account_number,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
        }


_OUTCOME_EVENTS = {
    (TransactionType.DEPOSIT, TransactionOutcome.COMPLETED): AuditEventType.DEPOSIT_COMPLETED,
    (TransactionType.WITHDRAWAL, TransactionOutcome.COMPLETED): AuditEventType.WITHDRAWAL_COMPLETED,
    (TransactionType.WITHDRAWAL, TransactionOutcome.POLICY_REJECTED): AuditEventType.WITHDRAWAL_POLICY_REJECTED,
}


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.account_opened("123456", Decimal("1000"))
        event = AuditEventBuilder.transaction(result)
    """

    @staticmethod
    def account_opened(
        account_number: str,
        initial_balance: Decimal
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_OPENED,
            account_number=account_number,
            description=f"Account opened: #{account_number}",
            details={
                "initial_balance": str(initial_balance),
            },
        )

    @staticmethod
    def account_closed(
        account_number: str,
        was_active: bool
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_CLOSED,
            account_number=account_number,
            description=(
                f"Account closed: #{account_number}"
                if was_active
                else f"Account already closed: #{account_number}"
            ),
            details={
                "was_active": was_active,
            },
        )

    @staticmethod
    def account_wrapped(
        account_number: str,
        wrapper: str,
        details: Optional[dict] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_WRAPPED,
            account_number=account_number,
            description=f"Account #{account_number} wrapped by {wrapper}",
            details={"wrapper": wrapper, **(details or {})},
        )

    @staticmethod
    def listener_changed(
        account_number: str,
        listener: str,
        listener_count: int,
        attached: bool
    ) -> AuditEvent:
        return AuditEvent(
            event_type=(
                AuditEventType.LISTENER_ATTACHED
                if attached
                else AuditEventType.LISTENER_DETACHED
            ),
            severity=AuditSeverity.DEBUG,
            account_number=account_number,
            description=f"Listener {'attached' if attached else 'detached'}: {listener}",
            details={
                "listener": listener,
                "listener_count": listener_count,
            },
        )

    @staticmethod
    def transaction(result: TransactionResult) -> AuditEvent:
        """Build the event for any deposit or withdrawal result."""
        key = (result.transaction_type, result.outcome)
        if key in _OUTCOME_EVENTS:
            event_type = _OUTCOME_EVENTS[key]
        elif result.transaction_type == TransactionType.DEPOSIT:
            event_type = AuditEventType.DEPOSIT_REJECTED
        else:
            event_type = AuditEventType.WITHDRAWAL_REJECTED

        return AuditEvent(
            event_type=event_type,
            severity=AuditSeverity.INFO if result.succeeded else AuditSeverity.WARNING,
            account_number=result.account_number,
            description=result.message,
            details={
                "transaction_id": str(result.transaction_id),
                "amount": str(result.amount),
                "balance": str(result.balance),
            },
            error_code=None if result.succeeded else result.outcome.value,
        )
