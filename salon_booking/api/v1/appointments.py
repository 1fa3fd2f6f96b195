from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from salon_booking.api.v1.schemas import (
    AppointmentSchema,
    BookingRequestSchema,
    BookingResponseSchema,
    CompleteRequestSchema,
    ManualBookingRequestSchema,
    RescheduleRequestSchema,
)
from salon_booking.application.exceptions import SlotUnavailableError
from salon_booking.application.use_cases.booking import BookingResult, BookingUseCase
from salon_booking.domain.entities.appointment import Appointment
from salon_booking.wiring.dependencies import get_booking_use_case

router = APIRouter()


def _to_schema(appointment: Appointment) -> AppointmentSchema:
    return AppointmentSchema(
        id=appointment.id,
        client_id=appointment.client_id,
        master_id=appointment.master_id,
        service_id=appointment.service_id,
        date=appointment.date,
        time_slot=appointment.time_slot,
        status=appointment.status.value,
        price=appointment.price,
        final_price=appointment.final_price,
        notes=appointment.notes,
        created_at=appointment.created_at,
    )


def _booking_response(result: BookingResult) -> BookingResponseSchema:
    return BookingResponseSchema(
        appointments=[_to_schema(a) for a in result.appointments],
        verified=result.verified,
    )


def _run(action):
    try:
        return action()
    except SlotUnavailableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=f"Not found: {e}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/bookings", response_model=BookingResponseSchema, status_code=201)
def create_booking(
    req: BookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    def action():
        session = uc.build_session(
            [(item.service_id, item.master_id) for item in req.items],
            day=req.date,
            time_slot=req.time,
        )
        return uc.book_session(session, client_id=req.client_id, notes=req.notes)

    return _booking_response(_run(action))


@router.post("/appointments", response_model=BookingResponseSchema, status_code=201)
def create_manual_appointment(
    req: ManualBookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    result = _run(
        lambda: uc.book_manual(
            master_id=req.master_id,
            service_id=req.service_id,
            day=req.date,
            time_slot=req.time,
            client_id=req.client_id,
            notes=req.notes,
        )
    )
    return _booking_response(result)


@router.get("/clients/{client_id}/appointments", response_model=list[AppointmentSchema])
def list_client_appointments(
    client_id: str,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return [_to_schema(a) for a in uc.list_for_client(client_id)]


@router.get("/masters/{master_id}/appointments", response_model=list[AppointmentSchema])
def list_master_appointments(
    master_id: str,
    day: date | None = Query(None, alias="date"),
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return [_to_schema(a) for a in _run(lambda: uc.list_for_master(master_id, day))]


@router.post("/appointments/{appointment_id}/reschedule", response_model=AppointmentSchema)
def reschedule_appointment(
    appointment_id: str,
    req: RescheduleRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return _to_schema(_run(lambda: uc.reschedule(appointment_id, req.date, req.time)))


@router.post("/appointments/{appointment_id}/cancel", response_model=AppointmentSchema)
def cancel_appointment(
    appointment_id: str,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return _to_schema(_run(lambda: uc.cancel(appointment_id)))


@router.post("/appointments/{appointment_id}/complete", response_model=AppointmentSchema)
def complete_appointment(
    appointment_id: str,
    req: CompleteRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    return _to_schema(_run(lambda: uc.complete(appointment_id, req.final_price)))


@router.delete("/appointments/{appointment_id}", status_code=204)
def delete_appointment(
    appointment_id: str,
    uc: BookingUseCase = Depends(get_booking_use_case),
) -> Response:
    _run(lambda: uc.delete(appointment_id))
    return Response(status_code=204)
