"""Concrete transaction listeners."""

import sys
from typing import Optional, TextIO


class TransactionRecorder:
    """Keeps every message it receives, in order."""

    def __init__(self):
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


class TransactionLogger(TransactionRecorder):
    """
    Prints each transaction message on its own line.

    Writes to stdout unless a stream is given. stdout is looked up at
    call time so redirected output is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__()
        self._stream = stream

    def __call__(self, message: str) -> None:
        super().__call__(message)
        print(message, file=self._stream or sys.stdout)
