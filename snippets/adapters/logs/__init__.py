"""Message log adapters - Implementations of the MessageLogPort."""

from .message_log import MessageLog

__all__ = ["MessageLog"]
