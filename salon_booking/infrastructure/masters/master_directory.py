from __future__ import annotations

from salon_booking.application.ports.master_directory import MasterDirectoryPort
from salon_booking.domain.entities.master import Master
from salon_booking.infrastructure.masters.master_data import MASTERS


class InMemoryMasterDirectory(MasterDirectoryPort):
    def __init__(self, masters: dict[str, Master] | None = None) -> None:
        self._masters = masters if masters is not None else MASTERS

    def get_master(self, master_id: str) -> Master | None:
        return self._masters.get(master_id)

    def list_masters(self) -> list[Master]:
        return list(self._masters.values())
