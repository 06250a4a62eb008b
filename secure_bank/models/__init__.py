"""
Data Models Package

Pydantic models for transaction results, session reports and audit events.
"""

from secure_bank.models.transaction import (
    SessionReport,
    TransactionOutcome,
    TransactionResult,
    TransactionType,
)
from secure_bank.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "SessionReport",
    "TransactionOutcome",
    "TransactionResult",
    "TransactionType",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
