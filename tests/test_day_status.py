from __future__ import annotations

from datetime import date, datetime

from salon_booking.application.scheduling.day_status import classify_day, classify_range
from salon_booking.application.scheduling.slots import generate_slots
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.domain.entities.service import Service
from salon_booking.domain.entities.slot import DayStatus
from salon_booking.domain.entities.working_hours import DaySchedule

NOW = datetime(2026, 3, 4, 9, 0)  # Wednesday
YESTERDAY = date(2026, 3, 3)
TODAY = date(2026, 3, 4)
THURSDAY = date(2026, 3, 5)
SUNDAY = date(2026, 3, 8)

SCHEDULE = {i: DaySchedule(start="10:00", end="12:00") for i in range(1, 7)}
SCHEDULE[0] = DaySchedule(is_day_off=True)

CATALOG = {
    "long": Service(id="long", title="Complex coloring", price=7000, duration=120, category="coloring"),
    "short": Service(id="short", title="Fringe trim", price=500, duration=15, category="womens"),
}


def _appointment(day: date, time_slot: str, service_id: str = "long", id: str = "a1") -> Appointment:
    return Appointment(
        id=id,
        client_id="client-1",
        master_id="master-1",
        service_id=service_id,
        date=day,
        time_slot=time_slot,
    )


def test_past_day_is_disabled():
    assert classify_day(YESTERDAY, [], CATALOG, SCHEDULE, now=NOW) == DayStatus.disabled


def test_day_off_is_disabled():
    assert classify_day(SUNDAY, [], CATALOG, SCHEDULE, now=NOW) == DayStatus.disabled


def test_free_day_is_open():
    assert classify_day(THURSDAY, [], CATALOG, SCHEDULE, now=NOW) == DayStatus.open


def test_day_filled_by_one_long_appointment_is_fully_booked():
    appointments = [_appointment(THURSDAY, "10:00")]
    assert classify_day(THURSDAY, appointments, CATALOG, SCHEDULE, now=NOW) == DayStatus.fully_booked


def test_single_free_half_hour_keeps_day_open():
    appointments = [
        _appointment(THURSDAY, "10:00", service_id="short", id="a1"),
        _appointment(THURSDAY, "10:30", service_id="short", id="a2"),
        _appointment(THURSDAY, "11:00", service_id="short", id="a3"),
    ]
    # only 11:30 still has a free half hour
    assert classify_day(THURSDAY, appointments, CATALOG, SCHEDULE, now=NOW) == DayStatus.open


def test_today_after_last_slot_is_fully_booked():
    late = datetime(2026, 3, 4, 11, 10)
    assert classify_day(TODAY, [], CATALOG, SCHEDULE, now=late) == DayStatus.fully_booked


def test_open_day_may_still_lack_room_for_longer_service():
    appointments = [_appointment(THURSDAY, "11:00", service_id="short")]
    assert classify_day(THURSDAY, appointments, CATALOG, SCHEDULE, now=NOW) == DayStatus.open
    slots = generate_slots(THURSDAY, appointments, CATALOG, SCHEDULE, 120, now=NOW)
    assert not any(s.available for s in slots)


def test_fully_booked_matches_probe_slots():
    appointments = [_appointment(THURSDAY, "10:00", service_id="short"), _appointment(THURSDAY, "11:00", id="a2")]
    status = classify_day(THURSDAY, appointments, CATALOG, SCHEDULE, now=NOW)
    probe = generate_slots(THURSDAY, appointments, CATALOG, SCHEDULE, 30, now=NOW)
    assert (status == DayStatus.fully_booked) == (not any(s.available for s in probe))


def test_classify_range_covers_every_day():
    appointments = [_appointment(THURSDAY, "10:00")]
    result = classify_range(YESTERDAY, SUNDAY, appointments, CATALOG, SCHEDULE, now=NOW)

    assert list(result) == [date(2026, 3, d) for d in range(3, 9)]
    assert result[YESTERDAY] == DayStatus.disabled
    assert result[TODAY] == DayStatus.open
    assert result[THURSDAY] == DayStatus.fully_booked
    assert result[date(2026, 3, 6)] == DayStatus.open
    assert result[SUNDAY] == DayStatus.disabled
