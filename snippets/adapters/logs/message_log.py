"""Thread-safe in-memory message log.

Messages are collected in order and can be replayed through the
standard logging system with ``print_logs``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class MessageLog:
    """Collects messages in memory.

    Attributes:
        name: Logger name used when replaying messages

    Example:
        log = MessageLog()
        log.log("Test message")
        log.print_logs()
    """

    name: str = "snippets.messages"

    _messages: List[str] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(self.name)

    def log(self, message: str) -> None:
        with self._lock:
            self._messages.append(message)

    @property
    def messages(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._messages)

    def print_logs(self) -> Tuple[str, ...]:
        """Emit every collected message at INFO level.

        Returns:
            The messages that were emitted, oldest first.
        """
        messages = self.messages
        for message in messages:
            self._logger.info(message)
        return messages

    def clear(self) -> int:
        """Drop all collected messages.

        Returns:
            Number of messages that were dropped.
        """
        with self._lock:
            count = len(self._messages)
            self._messages.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)
