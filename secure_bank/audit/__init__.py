"""Audit logging package."""

from secure_bank.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
