from __future__ import annotations

import re

from salon_booking.application.exceptions import InvalidTimeFormat

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def time_to_minutes(value: str) -> int:
    """Convert "H:MM" / "HH:MM" to minutes since midnight."""
    match = _TIME_RE.match(value) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormat(f"Invalid time {value!r}, expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise InvalidTimeFormat(f"Invalid minutes in {value!r}")
    return hours * 60 + minutes


def minutes_to_time(mins: int, pad_hours: bool = False) -> str:
    """
    Convert minutes since midnight back to a time string.
    Hours are not zero-padded unless pad_hours is set ("9:05" vs "09:05"),
    which matches the time_slot values already stored on appointments.
    """
    hours, minutes = divmod(mins, 60)
    if pad_hours:
        return f"{hours:02d}:{minutes:02d}"
    return f"{hours}:{minutes:02d}"


def add_minutes(value: str, delta: int) -> str:
    return minutes_to_time(time_to_minutes(value) + delta)
