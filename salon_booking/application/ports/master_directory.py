from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.master import Master


class MasterDirectoryPort(ABC):
    @abstractmethod
    def get_master(self, master_id: str) -> Master | None:
        raise NotImplementedError

    @abstractmethod
    def list_masters(self) -> list[Master]:
        raise NotImplementedError
