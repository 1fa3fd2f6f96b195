from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime

from salon_booking.application.scheduling.conflicts import (
    DEFAULT_APPOINTMENT_DURATION,
    ServiceCatalog,
    is_slot_available,
)
from salon_booking.application.scheduling.time_utils import minutes_to_time, time_to_minutes
from salon_booking.application.scheduling.working_hours import DEFAULT_WORKING_INTERVAL, resolve_working_hours
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.domain.entities.slot import Slot
from salon_booking.domain.entities.working_hours import Interval, WorkingHours

SLOT_STEP_MINUTES = 30
LEAD_TIME_MINUTES = 30


def generate_slots(
    day: date,
    appointments: Sequence[Appointment],
    catalog: ServiceCatalog,
    schedule: WorkingHours | None,
    total_duration: int,
    now: datetime | None = None,
    step_minutes: int = SLOT_STEP_MINUTES,
    lead_time_minutes: int = LEAD_TIME_MINUTES,
    buffer_minutes: int = 0,
    exclude_appointment_id: str | None = None,
    default_interval: Interval = DEFAULT_WORKING_INTERVAL,
    default_duration: int = DEFAULT_APPOINTMENT_DURATION,
) -> list[Slot]:
    """
    Enumerate slots for `day` every `step_minutes` from the start of the
    working interval up to (not including) its end.

    A slot is unavailable when, checked in order:
      1. slot start + total_duration runs past closing time,
      2. `day` is today and the slot starts before now + lead time,
      3. the interval overlaps an existing active appointment.

    Nothing is cached: the result depends only on the arguments.
    """
    interval = resolve_working_hours(day, schedule, default=default_interval)
    if interval is None:
        return []

    work_start = time_to_minutes(interval.start)
    work_end = time_to_minutes(interval.end)

    if now is None:
        now = datetime.now()
    is_today = day == now.date()
    now_minutes = now.hour * 60 + now.minute

    day_appointments = [a for a in appointments if a.date == day]

    slots: list[Slot] = []
    for mins in range(work_start, work_end, step_minutes):
        time_str = minutes_to_time(mins)

        if mins + total_duration > work_end:
            available = False
        elif is_today and mins < now_minutes + lead_time_minutes:
            available = False
        else:
            available = is_slot_available(
                day,
                time_str,
                total_duration,
                day_appointments,
                catalog,
                buffer_minutes=buffer_minutes,
                exclude_appointment_id=exclude_appointment_id,
                default_duration=default_duration,
            )

        slots.append(Slot(time=time_str, available=available))

    return slots


def available_times(slots: Sequence[Slot]) -> list[str]:
    return [slot.time for slot in slots if slot.available]
