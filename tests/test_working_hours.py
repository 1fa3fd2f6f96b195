from __future__ import annotations

from datetime import date

import pytest

from salon_booking.application.exceptions import InvalidScheduleError
from salon_booking.application.scheduling.working_hours import (
    is_day_off,
    resolve_working_hours,
    weekday_index,
)
from salon_booking.domain.entities.working_hours import DaySchedule, Interval

SUNDAY = date(2026, 3, 1)
MONDAY = date(2026, 3, 2)
SATURDAY = date(2026, 3, 7)

SCHEDULE = {
    0: DaySchedule(start="10:00", end="20:00", is_day_off=True),
    1: DaySchedule(start="10:00", end="20:00"),
    6: DaySchedule(start="11:00", end="16:00"),
}


def test_weekday_index_starts_on_sunday():
    assert weekday_index(SUNDAY) == 0
    assert weekday_index(MONDAY) == 1
    assert weekday_index(SATURDAY) == 6


def test_open_day_returns_interval():
    assert resolve_working_hours(MONDAY, SCHEDULE) == Interval(start="10:00", end="20:00")
    assert resolve_working_hours(SATURDAY, SCHEDULE) == Interval(start="11:00", end="16:00")


def test_day_off_is_closed():
    assert resolve_working_hours(SUNDAY, SCHEDULE) is None
    assert is_day_off(SUNDAY, SCHEDULE) is True


def test_missing_weekday_is_closed():
    tuesday = date(2026, 3, 3)
    assert resolve_working_hours(tuesday, SCHEDULE) is None
    assert is_day_off(tuesday, SCHEDULE) is False


def test_missing_schedule_uses_default_hours():
    assert resolve_working_hours(SUNDAY, None) == Interval(start="10:00", end="20:00")
    assert is_day_off(SUNDAY, None) is False


def test_custom_default_interval():
    default = Interval(start="9:00", end="18:00")
    assert resolve_working_hours(MONDAY, None, default=default) == default


def test_inverted_hours_are_rejected():
    schedule = {1: DaySchedule(start="20:00", end="10:00")}
    with pytest.raises(InvalidScheduleError):
        resolve_working_hours(MONDAY, schedule)


def test_inverted_hours_ignored_on_day_off():
    schedule = {1: DaySchedule(start="20:00", end="10:00", is_day_off=True)}
    assert resolve_working_hours(MONDAY, schedule) is None
