from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date

from salon_booking.application.scheduling.time_utils import time_to_minutes
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.domain.entities.service import Service

DEFAULT_APPOINTMENT_DURATION = 60

ServiceCatalog = Mapping[str, Service]


def intervals_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    # Half-open intervals: touching ends are not an overlap.
    return a_start < b_end and b_start < a_end


def appointment_duration(
    appointment: Appointment,
    catalog: ServiceCatalog,
    default_duration: int = DEFAULT_APPOINTMENT_DURATION,
) -> int:
    service = catalog.get(appointment.service_id)
    return service.duration if service else default_duration


def find_conflicts(
    day: date,
    start_time: str,
    duration_minutes: int,
    appointments: Iterable[Appointment],
    catalog: ServiceCatalog,
    buffer_minutes: int = 0,
    exclude_appointment_id: str | None = None,
    default_duration: int = DEFAULT_APPOINTMENT_DURATION,
) -> list[Appointment]:
    """
    Return the active appointments on `day` whose interval overlaps the
    candidate [start_time, start_time + duration_minutes).

    buffer_minutes extends the end of both intervals; exclude_appointment_id
    skips one appointment (the one being rescheduled).
    """
    slot_start = time_to_minutes(start_time)
    slot_end = slot_start + duration_minutes + buffer_minutes

    conflicts: list[Appointment] = []
    for appointment in appointments:
        if not appointment.is_active or appointment.date != day:
            continue
        if exclude_appointment_id and appointment.id == exclude_appointment_id:
            continue
        app_start = time_to_minutes(appointment.time_slot)
        app_end = app_start + appointment_duration(appointment, catalog, default_duration) + buffer_minutes
        if intervals_overlap(slot_start, slot_end, app_start, app_end):
            conflicts.append(appointment)
    return conflicts


def is_slot_available(
    day: date,
    start_time: str,
    duration_minutes: int,
    appointments: Iterable[Appointment],
    catalog: ServiceCatalog,
    buffer_minutes: int = 0,
    exclude_appointment_id: str | None = None,
    default_duration: int = DEFAULT_APPOINTMENT_DURATION,
) -> bool:
    """True if the candidate interval does not overlap any active appointment on that date."""
    return not find_conflicts(
        day,
        start_time,
        duration_minutes,
        appointments,
        catalog,
        buffer_minutes=buffer_minutes,
        exclude_appointment_id=exclude_appointment_id,
        default_duration=default_duration,
    )
