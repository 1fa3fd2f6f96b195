from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Slot:
    time: str
    available: bool


class DayStatus(str, Enum):
    disabled = "disabled"
    fully_booked = "fully_booked"
    open = "open"
