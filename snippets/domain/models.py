"""Domain models for the snippets project.

Value objects are frozen dataclasses with slots. ``Order`` is the one
mutable entity: its status changes only through ``set_status``, which
enforces the single guard rule of the order lifecycle.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import date
from enum import Enum, auto

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    """Lifecycle status of an order.

    No ordering is implied between values; the only rule is that a
    delivered order cannot be cancelled.
    """

    NEW = auto()
    IN_PROGRESS = auto()
    DELIVERED = auto()
    CANCELLED = auto()


@dataclass
class Order:
    """An order holding a single status, initially NEW.

    Every transition is accepted except DELIVERED -> CANCELLED, which is
    rejected with a warning and leaves the status unchanged. Backward
    moves and self-transitions are allowed.

    Attributes:
        status: Current status (read-only, use set_status to change it)
    """

    _status: OrderStatus = field(default=OrderStatus.NEW, repr=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @property
    def status(self) -> OrderStatus:
        with self._lock:
            return self._status

    def get_status(self) -> OrderStatus:
        """Return the current status."""
        return self.status

    def set_status(self, new_status: OrderStatus) -> bool:
        """Move the order to ``new_status``.

        Args:
            new_status: The requested status.

        Returns:
            True if the status was applied, False if the transition was
            rejected.
        """
        with self._lock:
            if (
                self._status is OrderStatus.DELIVERED
                and new_status is OrderStatus.CANCELLED
            ):
                logger.warning(
                    "Cannot cancel a delivered order",
                    extra={"current": self._status.name, "requested": new_status.name},
                )
                return False

            logger.debug(
                "Order status changed",
                extra={"previous": self._status.name, "current": new_status.name},
            )
            self._status = new_status
            return True

    def __repr__(self) -> str:
        return f"Order(status={self.status.name})"


class Season(Enum):
    WINTER = auto()
    SPRING = auto()
    SUMMER = auto()
    AUTUMN = auto()


SEASON_NAMES = {
    Season.WINTER: "Зима",
    Season.SPRING: "Весна",
    Season.SUMMER: "Лето",
    Season.AUTUMN: "Осень",
}

UNKNOWN_SEASON = "Неизвестный сезон"


def season_name(season: object) -> str:
    """Return the Russian display name of a season."""
    if not isinstance(season, Season):
        return UNKNOWN_SEASON
    return SEASON_NAMES[season]


@dataclass(frozen=True, slots=True)
class CopyTimings:
    """Elapsed time of the two copy strategies, in milliseconds.

    Attributes:
        line_copy_ms: Line-buffered copy duration
        bulk_copy_ms: Bulk byte transfer duration
    """

    line_copy_ms: float
    bulk_copy_ms: float

    @property
    def faster(self) -> str:
        """Name of the faster strategy ("line" or "bulk")."""
        return "bulk" if self.bulk_copy_ms <= self.line_copy_ms else "line"


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """One day of a month calendar.

    Attributes:
        day: The calendar date
        weekday_name: English weekday name (e.g. 'MONDAY')
        is_weekend: True for Saturday and Sunday
    """

    day: date
    weekday_name: str
    is_weekend: bool

    @property
    def label(self) -> str:
        return "Weekend" if self.is_weekend else "Working day"
