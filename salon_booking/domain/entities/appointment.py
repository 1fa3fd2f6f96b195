from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


@dataclass(frozen=True)
class Appointment:
    id: str
    client_id: str
    master_id: str
    service_id: str
    date: date
    time_slot: str  # "H:MM" / "HH:MM"
    status: AppointmentStatus = AppointmentStatus.confirmed
    price: int = 0
    final_price: int | None = None
    notes: str | None = None
    created_at: float | None = None

    @property
    def is_active(self) -> bool:
        return self.status != AppointmentStatus.cancelled
