"""
Tests for overlap detection between a candidate slot and existing appointments.
"""

from __future__ import annotations

from datetime import date

from salon_booking.application.scheduling.conflicts import (
    appointment_duration,
    find_conflicts,
    intervals_overlap,
    is_slot_available,
)
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus
from salon_booking.domain.entities.service import Service

DAY = date(2026, 3, 3)
CATALOG = {
    "w1": Service(id="w1", title="Women's haircut", price=2500, duration=60, category="womens"),
    "c1": Service(id="c1", title="Coloring", price=4000, duration=120, category="coloring"),
}


def _appointment(time_slot: str, service_id: str = "w1", status=AppointmentStatus.confirmed, day=DAY, id="a1"):
    return Appointment(
        id=id,
        client_id="client-1",
        master_id="master-1",
        service_id=service_id,
        date=day,
        time_slot=time_slot,
        status=status,
    )


def test_intervals_overlap_is_strict():
    assert intervals_overlap(0, 60, 30, 90)
    assert intervals_overlap(30, 90, 0, 60)
    assert intervals_overlap(0, 120, 30, 60)
    assert not intervals_overlap(0, 60, 60, 120)
    assert not intervals_overlap(60, 120, 0, 60)


def test_overlap_with_existing_appointment():
    existing = [_appointment("14:00")]
    assert is_slot_available(DAY, "14:00", 30, existing, CATALOG) is False
    assert is_slot_available(DAY, "14:30", 30, existing, CATALOG) is False
    assert is_slot_available(DAY, "13:45", 30, existing, CATALOG) is False


def test_back_to_back_is_not_a_conflict():
    existing = [_appointment("14:00")]
    # ends exactly when the appointment starts
    assert is_slot_available(DAY, "13:30", 30, existing, CATALOG) is True
    # starts exactly when the appointment ends
    assert is_slot_available(DAY, "15:00", 30, existing, CATALOG) is True


def test_cancelled_appointments_are_ignored():
    existing = [_appointment("14:00", status=AppointmentStatus.cancelled)]
    assert is_slot_available(DAY, "14:00", 60, existing, CATALOG) is True


def test_completed_and_pending_still_block():
    assert is_slot_available(DAY, "14:00", 30, [_appointment("14:00", status=AppointmentStatus.pending)], CATALOG) is False
    assert is_slot_available(DAY, "14:00", 30, [_appointment("14:00", status=AppointmentStatus.completed)], CATALOG) is False


def test_other_dates_are_ignored():
    existing = [_appointment("14:00", day=date(2026, 3, 4))]
    assert is_slot_available(DAY, "14:00", 60, existing, CATALOG) is True


def test_unknown_service_defaults_to_sixty_minutes():
    existing = [_appointment("10:00", service_id="missing")]
    assert appointment_duration(existing[0], CATALOG) == 60
    assert is_slot_available(DAY, "10:30", 30, existing, CATALOG) is False
    assert is_slot_available(DAY, "11:00", 30, existing, CATALOG) is True


def test_duration_comes_from_catalog():
    existing = [_appointment("10:00", service_id="c1")]
    assert is_slot_available(DAY, "11:30", 30, existing, CATALOG) is False
    assert is_slot_available(DAY, "12:00", 30, existing, CATALOG) is True


def test_buffer_minutes_extend_intervals():
    existing = [_appointment("14:00")]
    assert is_slot_available(DAY, "15:00", 30, existing, CATALOG, buffer_minutes=0) is True
    assert is_slot_available(DAY, "15:00", 30, existing, CATALOG, buffer_minutes=15) is False


def test_excluded_appointment_does_not_conflict():
    existing = [_appointment("14:00", id="moving")]
    assert is_slot_available(DAY, "14:30", 60, existing, CATALOG, exclude_appointment_id="moving") is True


def test_find_conflicts_lists_overlapping_appointments():
    existing = [
        _appointment("10:00", id="a1"),
        _appointment("11:00", id="a2"),
        _appointment("13:00", id="a3"),
    ]
    conflicts = find_conflicts(DAY, "10:30", 60, existing, CATALOG)
    assert [c.id for c in conflicts] == ["a1", "a2"]
