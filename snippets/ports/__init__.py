"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the building blocks and the
concrete adapters behind them, which keeps the shared resources and
the clock injectable and the code testable.
"""

from .clock import ClockPort
from .resources import DatabaseConnectionPort, MessageLogPort
from .text import TextProcessorPort

__all__ = [
    # Text
    "TextProcessorPort",
    # Shared resources
    "DatabaseConnectionPort",
    "MessageLogPort",
    # Time
    "ClockPort",
]
