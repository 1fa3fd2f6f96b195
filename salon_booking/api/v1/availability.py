from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_booking.api.v1.schemas import (
    CalendarDaySchema,
    CalendarResponseSchema,
    DayStatusSchema,
    SlotSchema,
    SlotsResponseSchema,
)
from salon_booking.application.use_cases.availability import AvailabilityUseCase
from salon_booking.wiring.dependencies import get_availability_use_case

router = APIRouter()


@router.get("/masters/{master_id}/slots", response_model=SlotsResponseSchema)
def get_slots(
    master_id: str,
    day: date = Query(..., alias="date"),
    duration: int | None = Query(None, gt=0),
    service_ids: list[str] | None = Query(None),
    uc: AvailabilityUseCase = Depends(get_availability_use_case),
):
    try:
        total = uc.resolve_duration(duration, service_ids)
        slots = uc.get_slots(master_id, day, duration=total)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=f"Not found: {e}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SlotsResponseSchema(
        master_id=master_id,
        date=day,
        duration=total,
        slots=[SlotSchema(time=s.time, available=s.available) for s in slots],
    )


@router.get("/masters/{master_id}/calendar", response_model=CalendarResponseSchema)
def get_calendar(
    master_id: str,
    start: date,
    end: date,
    uc: AvailabilityUseCase = Depends(get_availability_use_case),
):
    if (end - start).days > 92:
        raise HTTPException(status_code=400, detail="Range too large (max 93 days)")
    try:
        days = uc.get_calendar(master_id, start, end)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=f"Not found: {e}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CalendarResponseSchema(
        master_id=master_id,
        days=[CalendarDaySchema(date=d, status=DayStatusSchema(status.value)) for d, status in days.items()],
    )
