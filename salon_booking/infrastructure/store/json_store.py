from __future__ import annotations

import json
import logging
import threading
import time
import uuid
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Any

from salon_booking.application.exceptions import AppointmentNotFoundError
from salon_booking.application.ports.appointment_store import AppointmentRepositoryPort
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus


class JsonAppointmentStore(AppointmentRepositoryPort):
    """Appointments kept in a single JSON file, rewritten atomically on every change."""

    def __init__(self, data_dir: str = "./data", filename: str = "appointments.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / filename
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def list_for_master(self, master_id: str, day: date | None = None) -> list[Appointment]:
        with self._lock:
            appointments = self._load()
        return [a for a in appointments.values() if a.master_id == master_id and (day is None or a.date == day)]

    def list_for_client(self, client_id: str) -> list[Appointment]:
        with self._lock:
            appointments = self._load()
        return [a for a in appointments.values() if a.client_id == client_id]

    def get(self, appointment_id: str) -> Appointment | None:
        with self._lock:
            return self._load().get(appointment_id)

    def add(self, appointment: Appointment) -> Appointment:
        stored = replace(
            appointment,
            id=appointment.id or uuid.uuid4().hex,
            created_at=appointment.created_at or time.time(),
        )
        with self._lock:
            appointments = self._load()
            appointments[stored.id] = stored
            self._save(appointments)
        return stored

    def update(self, appointment: Appointment) -> Appointment:
        with self._lock:
            appointments = self._load()
            if appointment.id not in appointments:
                raise AppointmentNotFoundError(appointment.id)
            appointments[appointment.id] = appointment
            self._save(appointments)
        return appointment

    def delete(self, appointment_id: str) -> bool:
        with self._lock:
            appointments = self._load()
            removed = appointments.pop(appointment_id, None)
            if removed is not None:
                self._save(appointments)
        return removed is not None

    def _load(self) -> dict[str, Appointment]:
        """Load appointments from disk, empty if the file is missing or corrupted."""
        if not self._file_path.exists():
            return {}
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            self._logger.error("Appointment file unreadable", extra={"reason": str(e)})
            return {}
        appointments = (self._deserialize(item) for item in data.get("appointments", []))
        return {a.id: a for a in appointments}

    def _save(self, appointments: dict[str, Appointment]) -> None:
        """Save appointments to the JSON file atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        payload = {
            "version": 1,
            "appointments": [self._serialize(a) for a in appointments.values()],
        }
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _serialize(self, appointment: Appointment) -> dict[str, Any]:
        return {
            "id": appointment.id,
            "client_id": appointment.client_id,
            "master_id": appointment.master_id,
            "service_id": appointment.service_id,
            "date": appointment.date.isoformat(),
            "time_slot": appointment.time_slot,
            "status": appointment.status.value,
            "price": appointment.price,
            "final_price": appointment.final_price,
            "notes": appointment.notes,
            "created_at": appointment.created_at,
        }

    def _deserialize(self, data: dict[str, Any]) -> Appointment:
        return Appointment(
            id=data["id"],
            client_id=data.get("client_id", ""),
            master_id=data.get("master_id", ""),
            service_id=data.get("service_id", ""),
            date=parse_calendar_date(data["date"]),
            time_slot=data["time_slot"],
            status=AppointmentStatus(data.get("status", AppointmentStatus.confirmed.value)),
            price=data.get("price", 0),
            final_price=data.get("final_price"),
            notes=data.get("notes"),
            created_at=data.get("created_at"),
        )


def parse_calendar_date(value: str) -> date:
    """
    Parse a stored date. Older records carry a full ISO timestamp
    ("2025-12-20T00:00:00.000Z"); only the calendar date part is kept.
    """
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return datetime.fromisoformat(value).date()
