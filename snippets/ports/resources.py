"""Shared resource ports - Process-wide collaborators.

The database connection and the message log used to be hidden global
singletons. They are now plain classes registered once in the
container and passed to whoever needs them.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class DatabaseConnectionPort(Protocol):
    """Port for the database connection.

    Implementation: adapters/database/connection.py
    """

    @property
    def dsn(self) -> str:
        """Connection string the connection was opened with."""
        ...

    @property
    def is_connected(self) -> bool:
        """True once the connection has been established."""
        ...

    def close(self) -> None:
        """Close the connection."""
        ...


class MessageLogPort(Protocol):
    """Port for the in-memory message log.

    Implementation: adapters/logs/message_log.py
    """

    def log(self, message: str) -> None:
        """Record a message."""
        ...

    @property
    def messages(self) -> Sequence[str]:
        """Messages recorded so far, oldest first."""
        ...

    def print_logs(self) -> Sequence[str]:
        """Emit every recorded message and return them."""
        ...
