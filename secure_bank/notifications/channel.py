"""
Notification Channel

An account announces completed transactions by publishing a short text
message. Anything callable with one string argument can listen.

DESIGN DECISION: Delivery is synchronous and in attachment order.
A listener that raises stops delivery to the listeners after it and the
exception reaches whoever triggered the transaction. The balance change
that caused the notification is not rolled back.
"""

from typing import Callable, Iterator

Listener = Callable[[str], None]


def describe_listener(listener: Listener) -> str:
    """Short, stable name for a listener, for logs."""
    name = getattr(listener, "__qualname__", None)
    if name is None:
        name = type(listener).__qualname__
    return name


class NotificationChannel:
    """
    Ordered list of listeners plus publish.

    The same listener may be attached more than once; it is then
    called once per attachment.
    """

    def __init__(self):
        self._listeners: list[Listener] = []

    def attach(self, listener: Listener) -> None:
        """Append a listener. Raises TypeError if it is not callable."""
        if not callable(listener):
            raise TypeError(
                f"Listener must be callable with a message, got {type(listener).__name__}"
            )
        self._listeners.append(listener)

    def detach(self, listener: Listener) -> None:
        """Remove the first attachment of a listener."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            raise ValueError(f"Listener is not attached: {describe_listener(listener)}") from None

    def publish(self, message: str) -> int:
        """
        Deliver a message to every listener, in attachment order.

        Returns the number of listeners notified.
        """
        listeners = list(self._listeners)
        for listener in listeners:
            listener(message)
        return len(listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[Listener]:
        return iter(list(self._listeners))
