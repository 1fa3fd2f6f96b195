from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime
from zoneinfo import ZoneInfo

from salon_booking.application.exceptions import MasterNotFoundError, ServiceNotFoundError
from salon_booking.application.ports.appointment_store import AppointmentRepositoryPort
from salon_booking.application.ports.master_directory import MasterDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.scheduling.conflicts import DEFAULT_APPOINTMENT_DURATION
from salon_booking.application.scheduling.day_status import PROBE_DURATION_MINUTES, classify_day, classify_range
from salon_booking.application.scheduling.slots import LEAD_TIME_MINUTES, SLOT_STEP_MINUTES, generate_slots
from salon_booking.application.scheduling.working_hours import DEFAULT_WORKING_INTERVAL
from salon_booking.domain.entities.master import Master
from salon_booking.domain.entities.slot import DayStatus, Slot
from salon_booking.domain.entities.working_hours import Interval


@dataclass(frozen=True)
class SchedulingPolicy:
    step_minutes: int = SLOT_STEP_MINUTES
    lead_time_minutes: int = LEAD_TIME_MINUTES
    probe_duration: int = PROBE_DURATION_MINUTES
    buffer_minutes: int = 0
    default_interval: Interval = DEFAULT_WORKING_INTERVAL
    default_duration: int = DEFAULT_APPOINTMENT_DURATION


class AvailabilityUseCase:
    """
    Computes slots and calendar day states for a master.

    Every call re-reads appointments from the repository so availability is
    never computed against a stale snapshot.
    """

    def __init__(
        self,
        appointments: AppointmentRepositoryPort,
        catalog: ServiceCatalogPort,
        masters: MasterDirectoryPort,
        timezone: ZoneInfo,
        policy: SchedulingPolicy | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._appointments = appointments
        self._catalog = catalog
        self._masters = masters
        self._timezone = timezone
        self._policy = policy or SchedulingPolicy()
        self._clock = clock or (lambda: datetime.now(self._timezone))
        self._logger = logging.getLogger(__name__)

    @property
    def policy(self) -> SchedulingPolicy:
        return self._policy

    def now(self) -> datetime:
        return self._clock()

    def get_master(self, master_id: str) -> Master:
        master = self._masters.get_master(master_id)
        if master is None:
            raise MasterNotFoundError(master_id)
        return master

    def resolve_duration(self, duration: int | None = None, service_ids: Sequence[str] | None = None) -> int:
        """Total duration for the request: explicit minutes, or the sum of the listed services."""
        if duration is not None:
            if duration <= 0:
                raise ValueError("duration must be positive")
            return duration
        if not service_ids:
            return self._policy.probe_duration
        total = 0
        for service_id in service_ids:
            service = self._catalog.get_service(service_id)
            if service is None:
                raise ServiceNotFoundError(service_id)
            total += service.duration
        return total

    def get_slots(
        self,
        master_id: str,
        day: date,
        duration: int | None = None,
        service_ids: Sequence[str] | None = None,
        exclude_appointment_id: str | None = None,
    ) -> list[Slot]:
        master = self.get_master(master_id)
        total_duration = self.resolve_duration(duration, service_ids)
        snapshot = self._appointments.list_for_master(master.id, day)

        now = self.now()
        slots = generate_slots(
            day,
            snapshot,
            self._catalog.as_mapping(),
            master.working_hours,
            total_duration,
            now=now,
            step_minutes=self._policy.step_minutes,
            lead_time_minutes=self._policy.lead_time_minutes,
            buffer_minutes=self._policy.buffer_minutes,
            exclude_appointment_id=exclude_appointment_id,
            default_interval=self._policy.default_interval,
            default_duration=self._policy.default_duration,
        )
        if day < now.date():
            # past days keep their grid but nothing on them is bookable
            slots = [replace(slot, available=False) for slot in slots]
        self._logger.debug(
            "Slots generated",
            extra={
                "master_id": master.id,
                "date": day.isoformat(),
                "reason": f"{sum(s.available for s in slots)}/{len(slots)} available for {total_duration} min",
            },
        )
        return slots

    def classify_day(self, master_id: str, day: date) -> DayStatus:
        master = self.get_master(master_id)
        return classify_day(
            day,
            self._appointments.list_for_master(master.id, day),
            self._catalog.as_mapping(),
            master.working_hours,
            now=self.now(),
            probe_duration=self._policy.probe_duration,
            step_minutes=self._policy.step_minutes,
            lead_time_minutes=self._policy.lead_time_minutes,
            buffer_minutes=self._policy.buffer_minutes,
            default_interval=self._policy.default_interval,
        )

    def get_calendar(self, master_id: str, start: date, end: date) -> dict[date, DayStatus]:
        if end < start:
            raise ValueError("end date must not be before start date")
        master = self.get_master(master_id)
        return classify_range(
            start,
            end,
            self._appointments.list_for_master(master.id),
            self._catalog.as_mapping(),
            master.working_hours,
            now=self.now(),
            probe_duration=self._policy.probe_duration,
            step_minutes=self._policy.step_minutes,
            lead_time_minutes=self._policy.lead_time_minutes,
            buffer_minutes=self._policy.buffer_minutes,
            default_interval=self._policy.default_interval,
        )
