from __future__ import annotations

from datetime import date

from salon_booking.application.exceptions import InvalidScheduleError
from salon_booking.application.scheduling.time_utils import time_to_minutes
from salon_booking.domain.entities.working_hours import Interval, WorkingHours

DEFAULT_WORKING_INTERVAL = Interval(start="10:00", end="20:00")


def weekday_index(day: date) -> int:
    """Weekday index with 0 = Sunday .. 6 = Saturday."""
    return (day.weekday() + 1) % 7


def resolve_working_hours(
    day: date,
    schedule: WorkingHours | None,
    default: Interval = DEFAULT_WORKING_INTERVAL,
) -> Interval | None:
    """
    Return the open interval for the given date, or None when closed.

    A missing schedule (None) means the provider is open every day with the
    default hours. A schedule without an entry for the weekday, or with the
    entry marked as a day off, means closed.
    """
    if schedule is None:
        return default

    entry = schedule.get(weekday_index(day))
    if entry is None or entry.is_day_off:
        return None

    if time_to_minutes(entry.start) >= time_to_minutes(entry.end):
        raise InvalidScheduleError(
            f"Working hours {entry.start}-{entry.end} for weekday {weekday_index(day)} are not a same-day interval"
        )
    return Interval(start=entry.start, end=entry.end)


def is_day_off(day: date, schedule: WorkingHours | None) -> bool:
    if schedule is None:
        return False
    entry = schedule.get(weekday_index(day))
    return entry.is_day_off if entry is not None else False
