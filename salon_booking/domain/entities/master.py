from __future__ import annotations

from dataclasses import dataclass, field

from salon_booking.domain.entities.working_hours import WorkingHours


@dataclass(frozen=True)
class Master:
    id: str
    name: str
    specializations: list[str] = field(default_factory=list)
    working_hours: WorkingHours | None = None  # None -> default hours every day
