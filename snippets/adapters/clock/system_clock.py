"""System clock adapter."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Optional


@dataclass(frozen=True)
class SystemClock:
    """Clock backed by the operating system.

    Attributes:
        tz: Optional timezone; naive local time when None
    """

    tz: Optional[tzinfo] = None

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()
