"""Transaction notification package."""

from secure_bank.notifications.channel import (
    Listener,
    NotificationChannel,
    describe_listener,
)
from secure_bank.notifications.listeners import TransactionLogger, TransactionRecorder

__all__ = [
    "Listener",
    "NotificationChannel",
    "TransactionLogger",
    "TransactionRecorder",
    "describe_listener",
]
