from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import date

from salon_booking.domain.entities.master import Master
from salon_booking.domain.entities.service import Service


@dataclass(frozen=True)
class CartItem:
    service: Service
    master: Master | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


@dataclass(frozen=True)
class BookingSession:
    items: tuple[CartItem, ...] = ()
    selected_date: date | None = None
    selected_time: str | None = None  # start time of the first item
    rescheduling_id: str | None = None

    @property
    def total_duration(self) -> int:
        return sum(item.service.duration for item in self.items)

    @property
    def total_price(self) -> int:
        return sum(item.service.price for item in self.items)

    def add(self, service: Service, master: Master | None = None) -> BookingSession:
        return replace(self, items=self.items + (CartItem(service=service, master=master),))

    def remove(self, item_id: str) -> BookingSession:
        return replace(self, items=tuple(item for item in self.items if item.id != item_id))

    def clear(self) -> BookingSession:
        return replace(self, items=())

    def select(self, selected_date: date | None, selected_time: str | None = None) -> BookingSession:
        return replace(self, selected_date=selected_date, selected_time=selected_time)

    def reset(self) -> BookingSession:
        return BookingSession()
