from datetime import date
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field


class DayStatusSchema(str, Enum):
    disabled = "disabled"
    fully_booked = "fully_booked"
    open = "open"


def _calendar_date(value):
    # Clients may send a full ISO timestamp; only the date part matters.
    if isinstance(value, str) and len(value) > 10:
        return value[:10]
    return value


CalendarDate = Annotated[date, BeforeValidator(_calendar_date)]


class SlotSchema(BaseModel):
    time: str
    available: bool


class SlotsResponseSchema(BaseModel):
    master_id: str
    date: date
    duration: int
    slots: list[SlotSchema]


class CalendarDaySchema(BaseModel):
    date: date
    status: DayStatusSchema


class CalendarResponseSchema(BaseModel):
    master_id: str
    days: list[CalendarDaySchema]


class CartItemSchema(BaseModel):
    service_id: str
    master_id: str | None = None


class BookingRequestSchema(BaseModel):
    client_id: str
    items: list[CartItemSchema] = Field(min_length=1)
    date: CalendarDate
    time: str
    notes: str | None = None


class ManualBookingRequestSchema(BaseModel):
    master_id: str
    service_id: str
    client_id: str
    date: CalendarDate
    time: str
    notes: str | None = None


class RescheduleRequestSchema(BaseModel):
    date: CalendarDate
    time: str


class CompleteRequestSchema(BaseModel):
    final_price: int | None = Field(default=None, ge=0)


class AppointmentSchema(BaseModel):
    id: str
    client_id: str
    master_id: str
    service_id: str
    date: date
    time_slot: str
    status: str
    price: int
    final_price: int | None = None
    notes: str | None = None
    created_at: float | None = None


class BookingResponseSchema(BaseModel):
    appointments: list[AppointmentSchema]
    verified: bool
