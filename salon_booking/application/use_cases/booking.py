from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date

from salon_booking.application.exceptions import (
    AppointmentNotFoundError,
    BookingValidationError,
    ServiceNotFoundError,
    SlotUnavailableError,
)
from salon_booking.application.ports.appointment_store import AppointmentRepositoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.scheduling.conflicts import find_conflicts
from salon_booking.application.scheduling.sequencer import sequence_cart_start_times
from salon_booking.application.scheduling.time_utils import minutes_to_time, time_to_minutes
from salon_booking.application.scheduling.working_hours import resolve_working_hours
from salon_booking.application.use_cases.availability import AvailabilityUseCase
from salon_booking.domain.entities.appointment import Appointment, AppointmentStatus
from salon_booking.domain.entities.cart import BookingSession, CartItem
from salon_booking.domain.entities.master import Master
from salon_booking.domain.entities.service import Service


@dataclass(frozen=True)
class BookingResult:
    appointments: list[Appointment]
    verified: bool


class BookingUseCase:
    def __init__(
        self,
        availability: AvailabilityUseCase,
        appointments: AppointmentRepositoryPort,
        catalog: ServiceCatalogPort,
        default_master_id: str,
    ) -> None:
        self._availability = availability
        self._appointments = appointments
        self._catalog = catalog
        self._default_master_id = default_master_id
        self._logger = logging.getLogger(__name__)

    def book_session(
        self,
        session: BookingSession,
        client_id: str,
        notes: str | None = None,
    ) -> BookingResult:
        """
        Turn a booking session into appointments.

        The chosen start must be an available slot for the whole cart. Items
        are then chained back to back and each one is checked again against
        its own master's appointments before anything is written.
        """
        if session.rescheduling_id:
            if session.selected_date is None or not session.selected_time:
                raise BookingValidationError("Date and time are required to reschedule")
            moved = self.reschedule(session.rescheduling_id, session.selected_date, session.selected_time)
            return BookingResult(appointments=[moved], verified=True)

        if not session.items:
            raise BookingValidationError("Cart is empty")
        if session.selected_date is None or not session.selected_time:
            raise BookingValidationError("Date and time must be selected")

        day = session.selected_date
        start_time = _normalize_time(session.selected_time)
        for item in session.items:
            self._ensure_master_offers(self._master_for(item), item.service)
        primary = self._master_for(session.items[0])

        self._ensure_slot_available(primary.id, day, start_time, session.total_duration)

        planned: list[Appointment] = []
        for item, item_start in sequence_cart_start_times(session.items, start_time):
            master = self._master_for(item)
            self._ensure_item_fits(master, day, item_start, item.service.duration, item.service.id)
            planned.append(
                Appointment(
                    id="",
                    client_id=client_id,
                    master_id=master.id,
                    service_id=item.service.id,
                    date=day,
                    time_slot=item_start,
                    status=AppointmentStatus.confirmed,
                    price=item.service.price,
                    notes=notes,
                )
            )

        saved = [self._appointments.add(appointment) for appointment in planned]
        for appointment in saved:
            self._logger.info(
                "Appointment booked",
                extra={
                    "appointment_id": appointment.id,
                    "master_id": appointment.master_id,
                    "date": appointment.date.isoformat(),
                    "time_slot": appointment.time_slot,
                    "service": appointment.service_id,
                },
            )

        return BookingResult(appointments=saved, verified=self._verify(saved))

    def build_session(
        self,
        items: list[tuple[str, str | None]],
        day: date | None = None,
        time_slot: str | None = None,
    ) -> BookingSession:
        """Build a session from (service_id, master_id) pairs, keeping their order."""
        session = BookingSession()
        for service_id, master_id in items:
            service = self._catalog.get_service(service_id)
            if service is None:
                raise ServiceNotFoundError(service_id)
            master = self._availability.get_master(master_id) if master_id else None
            session = session.add(service, master)
        return session.select(day, time_slot)

    def book_manual(
        self,
        master_id: str,
        service_id: str,
        day: date,
        time_slot: str,
        client_id: str,
        notes: str | None = None,
    ) -> BookingResult:
        """Admin entry of a single appointment; same checks as a client booking."""
        service = self._catalog.get_service(service_id)
        if service is None:
            raise ServiceNotFoundError(service_id)
        master = self._availability.get_master(master_id)
        session = BookingSession().add(service, master).select(day, time_slot)
        return self.book_session(session, client_id=client_id, notes=notes)

    def reschedule(self, appointment_id: str, new_date: date, new_time: str) -> Appointment:
        appointment = self._get(appointment_id)
        if appointment.status in (AppointmentStatus.cancelled, AppointmentStatus.completed):
            raise BookingValidationError(f"Cannot reschedule a {appointment.status.value} appointment")

        new_time = _normalize_time(new_time)
        duration = self._catalog.get_duration_minutes(appointment.service_id)
        self._ensure_slot_available(
            appointment.master_id,
            new_date,
            new_time,
            duration,
            exclude_appointment_id=appointment.id,
        )

        updated = self._appointments.update(replace(appointment, date=new_date, time_slot=new_time))
        self._logger.info(
            "Appointment rescheduled",
            extra={
                "appointment_id": updated.id,
                "date": updated.date.isoformat(),
                "time_slot": updated.time_slot,
            },
        )
        return updated

    def cancel(self, appointment_id: str) -> Appointment:
        appointment = self._get(appointment_id)
        if appointment.status == AppointmentStatus.cancelled:
            return appointment
        updated = self._appointments.update(replace(appointment, status=AppointmentStatus.cancelled))
        self._logger.info("Appointment cancelled", extra={"appointment_id": updated.id})
        return updated

    def complete(self, appointment_id: str, final_price: int | None = None) -> Appointment:
        appointment = self._get(appointment_id)
        if appointment.status == AppointmentStatus.cancelled:
            raise BookingValidationError("Cannot complete a cancelled appointment")
        updated = self._appointments.update(
            replace(
                appointment,
                status=AppointmentStatus.completed,
                final_price=final_price if final_price is not None else appointment.price,
            )
        )
        self._logger.info("Appointment completed", extra={"appointment_id": updated.id})
        return updated

    def delete(self, appointment_id: str) -> None:
        if not self._appointments.delete(appointment_id):
            raise AppointmentNotFoundError(appointment_id)
        self._logger.info("Appointment deleted", extra={"appointment_id": appointment_id})

    def list_for_client(self, client_id: str) -> list[Appointment]:
        return sorted(self._appointments.list_for_client(client_id), key=_sort_key)

    def list_for_master(self, master_id: str, day: date | None = None) -> list[Appointment]:
        master = self._availability.get_master(master_id)
        return sorted(self._appointments.list_for_master(master.id, day), key=_sort_key)

    def _get(self, appointment_id: str) -> Appointment:
        appointment = self._appointments.get(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    def _master_for(self, item: CartItem) -> Master:
        if item.master is not None:
            return item.master
        return self._availability.get_master(self._default_master_id)

    def _ensure_master_offers(self, master: Master, service: Service) -> None:
        if master.specializations and not (
            service.id in master.specializations or service.category in master.specializations
        ):
            raise BookingValidationError(f"{master.name} does not provide {service.title}")

    def _ensure_slot_available(
        self,
        master_id: str,
        day: date,
        start_time: str,
        duration: int,
        exclude_appointment_id: str | None = None,
    ) -> None:
        if day < self._availability.now().date():
            self._logger.warning(
                "Requested date is in the past",
                extra={"master_id": master_id, "date": day.isoformat(), "time_slot": start_time},
            )
            raise SlotUnavailableError(f"{day.isoformat()} is in the past")
        slots = self._availability.get_slots(
            master_id,
            day,
            duration=duration,
            exclude_appointment_id=exclude_appointment_id,
        )
        start = time_to_minutes(start_time)
        if not any(slot.available and time_to_minutes(slot.time) == start for slot in slots):
            self._logger.warning(
                "Requested slot unavailable",
                extra={"master_id": master_id, "date": day.isoformat(), "time_slot": start_time},
            )
            raise SlotUnavailableError(f"{day.isoformat()} {start_time} is not available for {duration} min")

    def _ensure_item_fits(self, master: Master, day: date, start_time: str, duration: int, service_id: str) -> None:
        policy = self._availability.policy
        interval = resolve_working_hours(day, master.working_hours, default=policy.default_interval)
        start = time_to_minutes(start_time)
        if interval is None or start + duration > time_to_minutes(interval.end) or start < time_to_minutes(interval.start):
            raise SlotUnavailableError(f"{service_id} at {start_time} is outside working hours of {master.id}")

        conflicts = find_conflicts(
            day,
            start_time,
            duration,
            self._appointments.list_for_master(master.id, day),
            self._catalog.as_mapping(),
            buffer_minutes=policy.buffer_minutes,
            default_duration=policy.default_duration,
        )
        if conflicts:
            self._logger.warning(
                "Sequenced item conflicts",
                extra={
                    "master_id": master.id,
                    "time_slot": start_time,
                    "service": service_id,
                    "reason": ",".join(c.id for c in conflicts),
                },
            )
            raise SlotUnavailableError(f"{service_id} at {start_time} overlaps an existing appointment")

    def _verify(self, saved: list[Appointment]) -> bool:
        """
        Re-read after writing and report any overlap that slipped in
        concurrently. Advisory only: nothing is rolled back.
        """
        catalog = self._catalog.as_mapping()
        saved_ids = {a.id for a in saved}
        verified = True
        for appointment in saved:
            snapshot = [
                a
                for a in self._appointments.list_for_master(appointment.master_id, appointment.date)
                if a.id not in saved_ids
            ]
            conflicts = find_conflicts(
                appointment.date,
                appointment.time_slot,
                self._catalog.get_duration_minutes(appointment.service_id),
                snapshot,
                catalog,
                buffer_minutes=self._availability.policy.buffer_minutes,
                default_duration=self._availability.policy.default_duration,
            )
            if conflicts:
                verified = False
                self._logger.warning(
                    "Double booking detected after write",
                    extra={
                        "appointment_id": appointment.id,
                        "master_id": appointment.master_id,
                        "reason": ",".join(c.id for c in conflicts),
                    },
                )
        return verified


def _normalize_time(value: str) -> str:
    return minutes_to_time(time_to_minutes(value))


def _sort_key(appointment: Appointment) -> tuple[date, int]:
    return appointment.date, time_to_minutes(appointment.time_slot)
