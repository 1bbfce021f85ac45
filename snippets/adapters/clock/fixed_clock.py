"""Fixed clock for testing.

This clock always returns the instant it was created with, so date
helpers that depend on "now" become deterministic.

Example:
    clock = FixedClock(datetime(2024, 3, 1, 12, 0))
    assert days_until_new_year(clock) == 306
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass
class FixedClock:
    """Clock pinned to a single instant.

    Attributes:
        instant: The value returned by now()
    """

    instant: datetime

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()

    def advance(self, delta: timedelta) -> None:
        """Move the pinned instant forward by ``delta``."""
        self.instant = self.instant + delta
