from __future__ import annotations

from salon_booking.application.ports.service_catalog import ServiceCatalogPort
from salon_booking.application.scheduling.conflicts import DEFAULT_APPOINTMENT_DURATION
from salon_booking.domain.entities.service import Service
from salon_booking.infrastructure.catalog.service_catalog_data import SERVICE_CATALOG


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(
        self,
        catalog: dict[str, Service] | None = None,
        default_duration: int = DEFAULT_APPOINTMENT_DURATION,
    ) -> None:
        self._catalog = catalog if catalog is not None else SERVICE_CATALOG
        self._default_duration = default_duration

    def get_service(self, service_id: str) -> Service | None:
        return self._catalog.get(service_id.strip())

    def list_services(self) -> list[Service]:
        return list(self._catalog.values())

    def get_duration_minutes(self, service_id: str) -> int:
        entry = self.get_service(service_id)
        if not entry:
            return self._default_duration
        return entry.duration
