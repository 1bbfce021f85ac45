"""Clock port - Injectable source of the current time.

The date helpers read "now" through this protocol instead of calling
``datetime.now()`` directly, so tests can pin the time.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port for reading the current time.

    Implementations:
    - adapters/clock/system_clock.py (SystemClock) - Production
    - adapters/clock/fixed_clock.py (FixedClock) - Testing
    """

    def now(self) -> datetime:
        """Return the current local date and time."""
        ...

    def today(self) -> date:
        """Return the current local date."""
        ...
