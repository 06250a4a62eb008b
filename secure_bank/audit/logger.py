"""
Audit Logger

DESIGN DECISION: Every account operation is logged, including the
rejected ones. Listeners only hear about completed transactions, so
the audit log is the only place a refused deposit or withdrawal shows up.

The audit logger:
- Is synchronous, like the account itself
- Never lets a logging failure interfere with an account operation
"""

import logging
from decimal import Decimal
from typing import Any, Optional

import structlog

from secure_bank.config import LoggingSettings, get_settings
from secure_bank.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from secure_bank.models.transaction import TransactionResult


LOGGER_NAME = "secure_bank.audit"


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog for the secure_bank loggers.

    Runs once at import with the environment's settings; call again to
    switch level or renderer.
    """
    settings = settings or get_settings().logging

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("secure_bank").setLevel(settings.level)


configure_logging()


class AuditLogger:
    """
    Central audit logging service.

    Turns account operations into AuditEvents and writes them to the
    structured log at a level matching their severity.
    """

    def __init__(self, logger: Optional[Any] = None):
        """
        Initialize audit logger.

        Args:
            logger: Any object with debug/info/warning/error methods
                    taking an event name and keyword fields.
                    Defaults to the secure_bank.audit structlog logger.
        """
        self._logger = logger or structlog.get_logger(LOGGER_NAME)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if the underlying logger failed.
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            emit = self._logger.error
        elif event.severity == AuditSeverity.WARNING:
            emit = self._logger.warning
        elif event.severity == AuditSeverity.DEBUG:
            emit = self._logger.debug
        else:
            emit = self._logger.info

        try:
            emit("audit_event", **log_dict)
        except Exception:
            # A broken log sink never fails an account operation
            return False
        return True

    def log_account_opened(self, account_number: str, initial_balance: Decimal) -> None:
        self.log(AuditEventBuilder.account_opened(account_number, initial_balance))

    def log_account_closed(self, account_number: str, was_active: bool) -> None:
        self.log(AuditEventBuilder.account_closed(account_number, was_active))

    def log_account_wrapped(
        self,
        account_number: str,
        wrapper: str,
        details: Optional[dict] = None,
    ) -> None:
        self.log(AuditEventBuilder.account_wrapped(account_number, wrapper, details))

    def log_listener_changed(
        self,
        account_number: str,
        listener: str,
        listener_count: int,
        attached: bool,
    ) -> None:
        self.log(
            AuditEventBuilder.listener_changed(
                account_number, listener, listener_count, attached
            )
        )

    def log_transaction(self, result: TransactionResult) -> None:
        """Log a deposit or withdrawal, whatever its outcome."""
        self.log(AuditEventBuilder.transaction(result))
