from fastapi import APIRouter, Depends, Query

from salon_booking.api.v1.errors import raise_for_booking_error
from salon_booking.api.v1.schemas import (
    BookingRequestSchema, BookingResponseSchema, BookingSchema,
    CancellationResponseSchema, LedgerEntrySchema, SlotAvailabilitySchema,
    number_entries,
)
from salon_booking.api.v1.security import require_role
from salon_booking.application.use_cases.availability import AvailabilityUseCase
from salon_booking.application.use_cases.booking import BookingUseCase
from salon_booking.application.use_cases.cancellation import CancellationUseCase
from salon_booking.domain.entities.customer import Customer
from salon_booking.infrastructure.auth.credentials import Role
from salon_booking.wiring.dependencies import (
    get_availability_use_case, get_booking_use_case, get_cancellation_use_case,
)

router = APIRouter(dependencies=[Depends(require_role(Role.client))])


@router.get("/availability", response_model=list[SlotAvailabilitySchema])
def availability(uc: AvailabilityUseCase = Depends(get_availability_use_case)):
    return [SlotAvailabilitySchema.from_entity(row) for row in uc.grid()]


@router.post("/bookings", response_model=BookingResponseSchema, status_code=201)
def create_booking(
    req: BookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    result = uc.book(
        customer=req.customer.to_entity(),
        slot=req.slot,
        day=req.day,
        staff=req.staff,
        service_codes=req.services,
        payment_method=req.payment_method,
        tendered=req.tendered,
    )
    if result.error is not None:
        raise_for_booking_error(result.error)

    return BookingResponseSchema(
        booking=BookingSchema.from_entity(result.booking),
        change=result.change,
        pix_code=result.pix_code,
    )


@router.get("/bookings", response_model=list[LedgerEntrySchema])
def own_bookings(
    name: str = Query(..., pattern=r"\S"),
    phone: str = Query(..., pattern=r"\S"),
    uc: CancellationUseCase = Depends(get_cancellation_use_case),
):
    customer = Customer(name=name.strip(), phone=phone.strip())
    return number_entries(uc.list_cancelable(customer))


@router.delete("/bookings/{position}", response_model=CancellationResponseSchema)
def cancel_own_booking(
    position: int,
    name: str = Query(..., pattern=r"\S"),
    phone: str = Query(..., pattern=r"\S"),
    uc: CancellationUseCase = Depends(get_cancellation_use_case),
):
    customer = Customer(name=name.strip(), phone=phone.strip())
    result = uc.cancel_by_position(position, customer)
    if result.error is not None:
        raise_for_booking_error(result.error)
    return CancellationResponseSchema(booking=BookingSchema.from_entity(result.booking))
