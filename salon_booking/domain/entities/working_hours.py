from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DaySchedule:
    start: str = "10:00"
    end: str = "20:00"
    is_day_off: bool = False


# Weekday index (0 = Sunday .. 6 = Saturday) -> DaySchedule
WorkingHours = dict[int, DaySchedule]


@dataclass(frozen=True)
class Interval:
    start: str
    end: str
