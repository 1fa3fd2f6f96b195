from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from salon_booking.application.scheduling.conflicts import ServiceCatalog
from salon_booking.application.scheduling.slots import LEAD_TIME_MINUTES, SLOT_STEP_MINUTES, generate_slots
from salon_booking.application.scheduling.working_hours import DEFAULT_WORKING_INTERVAL, resolve_working_hours
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.domain.entities.slot import DayStatus
from salon_booking.domain.entities.working_hours import Interval, WorkingHours

# Smallest bookable unit. Calendar days are classified independently of the
# cart, so a day can be "open" and still have no room for a longer service.
PROBE_DURATION_MINUTES = 30


def classify_day(
    day: date,
    appointments: Sequence[Appointment],
    catalog: ServiceCatalog,
    schedule: WorkingHours | None,
    now: datetime | None = None,
    probe_duration: int = PROBE_DURATION_MINUTES,
    step_minutes: int = SLOT_STEP_MINUTES,
    lead_time_minutes: int = LEAD_TIME_MINUTES,
    buffer_minutes: int = 0,
    default_interval: Interval = DEFAULT_WORKING_INTERVAL,
) -> DayStatus:
    if now is None:
        now = datetime.now()

    if day < now.date():
        return DayStatus.disabled
    if resolve_working_hours(day, schedule, default=default_interval) is None:
        return DayStatus.disabled

    slots = generate_slots(
        day,
        appointments,
        catalog,
        schedule,
        probe_duration,
        now=now,
        step_minutes=step_minutes,
        lead_time_minutes=lead_time_minutes,
        buffer_minutes=buffer_minutes,
        default_interval=default_interval,
    )
    if not any(slot.available for slot in slots):
        return DayStatus.fully_booked
    return DayStatus.open


def classify_range(
    start: date,
    end: date,
    appointments: Sequence[Appointment],
    catalog: ServiceCatalog,
    schedule: WorkingHours | None,
    now: datetime | None = None,
    **options,
) -> dict[date, DayStatus]:
    """Classify every date in [start, end] (inclusive) for a calendar view."""
    if now is None:
        now = datetime.now()

    result: dict[date, DayStatus] = {}
    current = start
    while current <= end:
        result[current] = classify_day(current, appointments, catalog, schedule, now=now, **options)
        current += timedelta(days=1)
    return result
