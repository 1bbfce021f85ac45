# dates.py
"""Date and time utilities.

Each function is independent and stateless. Functions that need the
current time read it from a ``ClockPort`` (``SystemClock`` when none is
given) so callers and tests can pin "now".

Parsing goes through ``dateparser``, calendar arithmetic through
``dateutil``, localized names through ``babel`` and timezones through
the tz database (``zoneinfo``).
"""

from __future__ import annotations

import calendar
import logging
import random
import time
from contextlib import contextmanager
from datetime import date, datetime, timedelta
from typing import Callable, Dict, Iterator, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import dateparser
from babel.core import UnknownLocaleError
from babel.dates import format_date
from dateutil.relativedelta import relativedelta

from .adapters.clock import SystemClock
from .config import DatesConfig, get_config
from .domain.errors import ConfigurationError, DateParseError, UnknownTimeZoneError
from .domain.models import CalendarDay
from .ports.clock import ClockPort

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)


def _is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def display_current_datetime(
    clock: Optional[ClockPort] = None,
    config: Optional[DatesConfig] = None,
) -> str:
    """Format the current date and time and log it."""
    clock = clock or SystemClock()
    config = config or get_config().dates
    text = clock.now().strftime(config.display_format)
    logger.info(f"Current date and time: {text}")
    return text


def compare_dates(d1: date, d2: date) -> str:
    if d1 < d2:
        return f"{d1.isoformat()} is before {d2.isoformat()}"
    if d1 > d2:
        return f"{d1.isoformat()} is after {d2.isoformat()}"
    return "Dates are equal"


def days_until_new_year(clock: Optional[ClockPort] = None) -> int:
    """Days from today to January 1st of next year."""
    today = (clock or SystemClock()).today()
    return (date(today.year + 1, 1, 1) - today).days


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def count_weekends(month: int, year: int) -> int:
    """Count the Saturdays and Sundays of a month."""
    days_in_month = calendar.monthrange(year, month)[1]
    return sum(
        1 for day in range(1, days_in_month + 1) if _is_weekend(date(year, month, day))
    )


def measure_execution_time(task: Callable[[], object]) -> float:
    """Run ``task`` and return the elapsed wall time in milliseconds."""
    start = time.perf_counter()
    task()
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"Completed in {elapsed_ms:.3f} ms")
    return elapsed_ms


@contextmanager
def timed(label: str) -> Iterator[Dict[str, float]]:
    """Measure the enclosed block.

    The yielded dict gets an ``elapsed_ms`` entry when the block exits.

    Example:
        with timed("load") as timing:
            load()
        print(timing["elapsed_ms"])
    """
    timing: Dict[str, float] = {}
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing["elapsed_ms"] = (time.perf_counter() - start) * 1000
        logger.info(
            f"{label} completed in {timing['elapsed_ms']:.3f} ms",
            extra={"label": label, "elapsed_ms": timing["elapsed_ms"]},
        )


def parse_date(text: str, config: Optional[DatesConfig] = None) -> date:
    """Parse a day-first date string (``dd-mm-yyyy`` by default).

    Raises:
        DateParseError: If the string is not a complete, valid date.
    """
    config = config or get_config().dates
    parsed = dateparser.parse(
        text,
        date_formats=[config.parse_format],
        languages=["en"],
        settings={
            "DATE_ORDER": "DMY",
            "REQUIRE_PARTS": ["day", "month", "year"],
            "PARSERS": ["custom-formats"],
        },
    )
    if parsed is None:
        raise DateParseError(
            f"Malformed date string {text!r}",
            value=text,
            expected_format=config.parse_format,
        )
    return parsed.date()


def parse_and_add_days(
    text: str,
    days: Optional[int] = None,
    config: Optional[DatesConfig] = None,
) -> date:
    """Parse ``text`` and add ``days`` (configured default: 10)."""
    config = config or get_config().dates
    if days is None:
        days = config.days_to_add
    return parse_date(text, config) + timedelta(days=days)


def convert_time_zone(dt: datetime, zone: str) -> datetime:
    """Return the same instant expressed in ``zone``.

    Raises:
        DateParseError: If ``dt`` carries no timezone.
        UnknownTimeZoneError: If ``zone`` is not in the tz database.
    """
    if dt.tzinfo is None:
        raise DateParseError(
            "Cannot convert a naive datetime", value=dt.isoformat()
        )
    try:
        target = ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimeZoneError(f"Unknown timezone {zone!r}", zone=zone, cause=e)
    return dt.astimezone(target)


def calculate_age(birth: date, clock: Optional[ClockPort] = None) -> int:
    """Whole years elapsed between ``birth`` and today."""
    today = (clock or SystemClock()).today()
    return relativedelta(today, birth).years


def month_calendar(month: int, year: int) -> List[CalendarDay]:
    start = date(year, month, 1)
    end = start + relativedelta(months=1)
    days = []
    current = start
    while current < end:
        days.append(
            CalendarDay(
                day=current,
                weekday_name=WEEKDAY_NAMES[current.weekday()],
                is_weekend=_is_weekend(current),
            )
        )
        current += timedelta(days=1)
    return days


def random_date(
    start: date,
    end: date,
    rng: Optional[random.Random] = None,
) -> date:
    """Pick a day uniformly in ``[start, end]``, both ends included."""
    span = (end - start).days
    if span < 0:
        raise ValueError(f"End date {end} is before start date {start}")
    rng = rng or random.Random()
    return start + timedelta(days=rng.randint(0, span))


def time_until(event: datetime, clock: Optional[ClockPort] = None) -> timedelta:
    """Time left until ``event`` (negative once it has passed).

    An aware ``event`` is compared with the clock's time converted to
    local aware time; a naive ``event`` is taken to be in the clock's
    timezone.
    """
    now = (clock or SystemClock()).now()
    if event.tzinfo is not None and now.tzinfo is None:
        now = now.astimezone()
    elif event.tzinfo is None and now.tzinfo is not None:
        event = event.replace(tzinfo=now.tzinfo)
    return event - now


def working_hours(start: datetime, end: datetime) -> int:
    """Count whole hours in ``[start, end)`` that begin on a weekday."""
    if end <= start:
        return 0
    total = int((end - start).total_seconds() // 3600)
    return sum(
        1
        for hour in range(total)
        if not _is_weekend(start + timedelta(hours=hour))
    )


def format_with_locale(d: date, locale: Optional[str] = None) -> str:
    """Format ``d`` as ``dd MMMM yyyy`` with localized month names.

    Raises:
        ConfigurationError: If ``locale`` is not a known locale.
    """
    locale = locale or get_config().dates.locale
    try:
        return format_date(d, "dd MMMM yyyy", locale=locale)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown locale {locale!r}", setting_name="locale", cause=e
        )


def weekday_name(d: date, locale: Optional[str] = None) -> str:
    """Full localized weekday name of ``d``."""
    locale = locale or get_config().dates.locale
    try:
        return format_date(d, "EEEE", locale=locale)
    except (UnknownLocaleError, ValueError) as e:
        raise ConfigurationError(
            f"Unknown locale {locale!r}", setting_name="locale", cause=e
        )


def russian_weekday(d: date) -> str:
    return weekday_name(d, "ru")
