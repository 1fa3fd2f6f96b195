from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from salon_booking.core.config import settings
from salon_booking.application.ports.appointment_store import AppointmentRepositoryPort
from salon_booking.application.ports.master_directory import MasterDirectoryPort
from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.use_cases.availability import AvailabilityUseCase, SchedulingPolicy
from salon_booking.application.use_cases.booking import BookingUseCase
from salon_booking.domain.entities.working_hours import Interval
from salon_booking.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from salon_booking.infrastructure.masters.master_directory import InMemoryMasterDirectory
from salon_booking.infrastructure.store.json_store import JsonAppointmentStore
from salon_booking.infrastructure.store.memory_store import MemoryAppointmentStore


@lru_cache
def get_appointment_store() -> AppointmentRepositoryPort:
    if settings.STORE_PROVIDER.lower() == "json":
        return JsonAppointmentStore(data_dir=settings.DATA_DIR)
    if settings.ENV.lower() not in {"dev", "local", "test"}:
        logging.getLogger(__name__).warning(
            "Using in-memory appointment store",
            extra={"reason": f"STORE_PROVIDER={settings.STORE_PROVIDER}"},
        )
    return MemoryAppointmentStore()


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    return ServiceCatalogStore(default_duration=settings.DEFAULT_SERVICE_DURATION)


@lru_cache
def get_master_directory() -> MasterDirectoryPort:
    return InMemoryMasterDirectory()


def get_scheduling_policy() -> SchedulingPolicy:
    return SchedulingPolicy(
        step_minutes=settings.SLOT_STEP_MINUTES,
        lead_time_minutes=settings.LEAD_TIME_MINUTES,
        probe_duration=settings.MIN_PROBE_DURATION,
        buffer_minutes=settings.BOOKING_BUFFER_MINUTES,
        default_interval=Interval(start=settings.DEFAULT_WORK_START, end=settings.DEFAULT_WORK_END),
        default_duration=settings.DEFAULT_SERVICE_DURATION,
    )


def get_availability_use_case() -> AvailabilityUseCase:
    return AvailabilityUseCase(
        appointments=get_appointment_store(),
        catalog=get_service_catalog(),
        masters=get_master_directory(),
        timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
        policy=get_scheduling_policy(),
    )


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        availability=get_availability_use_case(),
        appointments=get_appointment_store(),
        catalog=get_service_catalog(),
        default_master_id=settings.DEFAULT_MASTER_ID,
    )
