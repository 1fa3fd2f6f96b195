from __future__ import annotations

import threading
import time
import uuid
from dataclasses import replace
from datetime import date

from salon_booking.application.exceptions import AppointmentNotFoundError
from salon_booking.application.ports.appointment_store import AppointmentRepositoryPort
from salon_booking.domain.entities.appointment import Appointment


class MemoryAppointmentStore(AppointmentRepositoryPort):
    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        self._appointments: dict[str, Appointment] = {a.id: a for a in appointments or []}
        self._lock = threading.Lock()

    def list_for_master(self, master_id: str, day: date | None = None) -> list[Appointment]:
        with self._lock:
            return [
                a
                for a in self._appointments.values()
                if a.master_id == master_id and (day is None or a.date == day)
            ]

    def list_for_client(self, client_id: str) -> list[Appointment]:
        with self._lock:
            return [a for a in self._appointments.values() if a.client_id == client_id]

    def get(self, appointment_id: str) -> Appointment | None:
        with self._lock:
            return self._appointments.get(appointment_id)

    def add(self, appointment: Appointment) -> Appointment:
        stored = replace(
            appointment,
            id=appointment.id or uuid.uuid4().hex,
            created_at=appointment.created_at or time.time(),
        )
        with self._lock:
            self._appointments[stored.id] = stored
        return stored

    def update(self, appointment: Appointment) -> Appointment:
        with self._lock:
            if appointment.id not in self._appointments:
                raise AppointmentNotFoundError(appointment.id)
            self._appointments[appointment.id] = appointment
        return appointment

    def delete(self, appointment_id: str) -> bool:
        with self._lock:
            return self._appointments.pop(appointment_id, None) is not None
