from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from salon_booking.domain.entities.appointment import Appointment


class AppointmentRepositoryPort(ABC):
    """
    Source of truth for existing appointments.

    Callers fetch a fresh snapshot with list_for_master() right before
    computing availability; the scheduling functions never hold on to it.
    """

    @abstractmethod
    def list_for_master(self, master_id: str, day: date | None = None) -> list[Appointment]:
        raise NotImplementedError

    @abstractmethod
    def list_for_client(self, client_id: str) -> list[Appointment]:
        raise NotImplementedError

    @abstractmethod
    def get(self, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, appointment: Appointment) -> Appointment:
        """Persist a new appointment. Returns it with the assigned id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, appointment: Appointment) -> Appointment:
        raise NotImplementedError

    @abstractmethod
    def delete(self, appointment_id: str) -> bool:
        """Hard delete. Returns True if something was removed."""
        raise NotImplementedError
