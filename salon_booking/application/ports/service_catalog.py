from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.service import Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[Service]:
        """List all bookable services."""
        raise NotImplementedError

    @abstractmethod
    def get_duration_minutes(self, service_id: str) -> int:
        """Get service duration in minutes. Falls back to the default duration if unknown."""
        raise NotImplementedError

    def as_mapping(self) -> dict[str, Service]:
        return {service.id: service for service in self.list_services()}
