"""Tests for the date/time utilities."""

import random
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from snippets import dates
from snippets.adapters.clock import FixedClock, SystemClock
from snippets.config import DatesConfig
from snippets.domain.errors import (
    ConfigurationError,
    DateParseError,
    UnknownTimeZoneError,
)


def test_display_current_datetime(fixed_clock):
    assert dates.display_current_datetime(fixed_clock) == "01-03-2024 12:30:45"


def test_display_current_datetime_custom_format(fixed_clock):
    config = DatesConfig(display_format="%Y/%m/%d")
    assert dates.display_current_datetime(fixed_clock, config) == "2024/03/01"


def test_display_current_datetime_reads_environment(fixed_clock, monkeypatch):
    monkeypatch.setenv("SNP_DATES_DISPLAY_FORMAT", "%H:%M")
    assert dates.display_current_datetime(fixed_clock) == "12:30"


@pytest.mark.parametrize(
    "d1, d2, expected",
    [
        (date(2024, 1, 1), date(2024, 1, 2), "2024-01-01 is before 2024-01-02"),
        (date(2024, 1, 3), date(2024, 1, 2), "2024-01-03 is after 2024-01-02"),
        (date(2024, 1, 2), date(2024, 1, 2), "Dates are equal"),
    ],
)
def test_compare_dates(d1, d2, expected):
    assert dates.compare_dates(d1, d2) == expected


def test_days_until_new_year(fixed_clock):
    assert dates.days_until_new_year(fixed_clock) == 306


def test_days_until_new_year_on_new_years_eve():
    clock = FixedClock(datetime(2023, 12, 31, 23, 59))
    assert dates.days_until_new_year(clock) == 1


@pytest.mark.parametrize(
    "year, expected",
    [(2024, True), (2023, False), (1900, False), (2000, True)],
)
def test_is_leap_year(year, expected):
    assert dates.is_leap_year(year) is expected


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (6, 2024, 10),  # starts on Saturday, 30 days
        (2, 2024, 8),
        (3, 2024, 10),  # 5 Saturdays, 5 Sundays
    ],
)
def test_count_weekends(month, year, expected):
    assert dates.count_weekends(month, year) == expected


def test_count_weekends_invalid_month():
    with pytest.raises(ValueError):
        dates.count_weekends(13, 2024)


def test_measure_execution_time_runs_task():
    calls = []
    elapsed = dates.measure_execution_time(lambda: calls.append(1))
    assert calls == [1]
    assert elapsed >= 0


def test_timed_context_manager(caplog):
    with caplog.at_level("INFO", logger="snippets.dates"):
        with dates.timed("block") as timing:
            sum(range(100))
    assert timing["elapsed_ms"] >= 0
    assert "block completed" in caplog.text


def test_parse_and_add_days_default():
    assert dates.parse_and_add_days("15-11-2023") == date(2023, 11, 25)


def test_parse_and_add_days_crosses_year():
    assert dates.parse_and_add_days("25-12-2023", days=10) == date(2024, 1, 4)


@pytest.mark.parametrize(
    "text",
    ["hello world", "2023", "tomorrow", "15/11/2023", "15 November 2023", "2023-11-15"],
)
def test_parse_and_add_days_rejects_malformed(text):
    with pytest.raises(DateParseError) as exc_info:
        dates.parse_and_add_days(text)
    assert exc_info.value.value == text
    assert exc_info.value.expected_format == "%d-%m-%Y"


def test_convert_time_zone_keeps_instant():
    dt = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    converted = dates.convert_time_zone(dt, "Europe/Moscow")

    assert converted == dt
    assert converted.hour == 15
    assert converted.tzinfo == ZoneInfo("Europe/Moscow")


def test_convert_time_zone_unknown_zone():
    dt = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    with pytest.raises(UnknownTimeZoneError) as exc_info:
        dates.convert_time_zone(dt, "Mars/Olympus_Mons")
    assert exc_info.value.zone == "Mars/Olympus_Mons"


def test_convert_time_zone_rejects_naive():
    with pytest.raises(DateParseError):
        dates.convert_time_zone(datetime(2024, 6, 1, 12, 0), "UTC")


def test_calculate_age(fixed_clock):
    assert dates.calculate_age(date(1990, 3, 1), fixed_clock) == 34
    assert dates.calculate_age(date(1990, 3, 2), fixed_clock) == 33


def test_month_calendar():
    days = dates.month_calendar(2, 2024)

    assert len(days) == 29
    assert days[0].day == date(2024, 2, 1)
    assert days[0].weekday_name == "THURSDAY"
    assert days[0].label == "Working day"
    assert days[2].weekday_name == "SATURDAY"
    assert days[2].is_weekend
    assert days[2].label == "Weekend"
    assert days[-1].day == date(2024, 2, 29)


def test_month_calendar_december():
    assert len(dates.month_calendar(12, 2023)) == 31


def test_random_date_within_bounds():
    rng = random.Random(42)
    start, end = date(2024, 1, 1), date(2024, 1, 10)
    for _ in range(100):
        assert start <= dates.random_date(start, end, rng) <= end


def test_random_date_single_day():
    d = date(2024, 1, 1)
    assert dates.random_date(d, d) == d


def test_random_date_rejects_reversed_range():
    with pytest.raises(ValueError):
        dates.random_date(date(2024, 1, 10), date(2024, 1, 1))


def test_time_until(fixed_clock):
    event = datetime(2024, 3, 2, 12, 30, 45)
    assert dates.time_until(event, fixed_clock) == timedelta(days=1)


def test_time_until_past_event_is_negative(fixed_clock):
    event = datetime(2024, 3, 1, 11, 30, 45)
    assert dates.time_until(event, fixed_clock) == timedelta(hours=-1)


def test_time_until_aware_event_with_aware_clock():
    clock = FixedClock(datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc))
    event = datetime(2024, 3, 1, 15, 0, tzinfo=ZoneInfo("Europe/Moscow"))
    assert dates.time_until(event, clock) == timedelta(0)


def test_time_until_aware_event_with_system_clock():
    event = datetime.now(timezone.utc) + timedelta(hours=2)
    remaining = dates.time_until(event, SystemClock())
    assert timedelta(hours=1) < remaining <= timedelta(hours=2)


def test_working_hours_skips_weekend():
    # Friday 2024-03-01 00:00 to Monday 2024-03-04 00:00
    start = datetime(2024, 3, 1)
    end = datetime(2024, 3, 4)
    assert dates.working_hours(start, end) == 24


def test_working_hours_partial_hours_ignored():
    start = datetime(2024, 3, 4, 9, 0)
    end = datetime(2024, 3, 4, 11, 59)
    assert dates.working_hours(start, end) == 2


def test_working_hours_empty_range():
    d = datetime(2024, 3, 4, 9, 0)
    assert dates.working_hours(d, d) == 0
    assert dates.working_hours(d, d - timedelta(hours=5)) == 0


def test_format_with_locale():
    d = date(2023, 11, 15)
    assert dates.format_with_locale(d, "en") == "15 November 2023"
    assert dates.format_with_locale(d, "ru") == "15 ноября 2023"


def test_format_with_unknown_locale():
    with pytest.raises(ConfigurationError) as exc_info:
        dates.format_with_locale(date(2023, 11, 15), "xx_YY")
    assert exc_info.value.setting_name == "locale"


def test_weekday_names():
    monday = date(2024, 1, 1)
    assert dates.weekday_name(monday, "en") == "Monday"
    assert dates.russian_weekday(monday) == "понедельник"


def test_weekday_name_uses_configured_locale(monkeypatch):
    monkeypatch.setenv("SNP_DATES_LOCALE", "en")
    assert dates.weekday_name(date(2024, 1, 2)) == "Tuesday"
