from fastapi import APIRouter, Depends

from salon_booking.api.v1.errors import raise_for_booking_error
from salon_booking.api.v1.schemas import (
    BookingSchema, CancellationResponseSchema, DailyReportSchema,
    LedgerEntrySchema, number_entries,
)
from salon_booking.api.v1.security import require_role
from salon_booking.application.use_cases.cancellation import CancellationUseCase
from salon_booking.application.use_cases.report import ReportUseCase
from salon_booking.infrastructure.auth.credentials import Role
from salon_booking.wiring.dependencies import get_cancellation_use_case, get_report_use_case

router = APIRouter(dependencies=[Depends(require_role(Role.staff))])


@router.get("/bookings", response_model=list[LedgerEntrySchema])
def all_bookings(uc: CancellationUseCase = Depends(get_cancellation_use_case)):
    return number_entries(uc.list_cancelable())


@router.delete("/bookings/{position}", response_model=CancellationResponseSchema)
def cancel_booking(
    position: int,
    uc: CancellationUseCase = Depends(get_cancellation_use_case),
):
    result = uc.cancel_by_position(position)
    if result.error is not None:
        raise_for_booking_error(result.error)
    return CancellationResponseSchema(booking=BookingSchema.from_entity(result.booking))


@router.get("/reports/daily", response_model=DailyReportSchema)
def daily_report(uc: ReportUseCase = Depends(get_report_use_case)):
    report = uc.daily_report()
    return DailyReportSchema(
        completed=[BookingSchema.from_entity(b) for b in report.completed],
        cancellations=[BookingSchema.from_entity(b) for b in report.cancellations],
        total_revenue=report.total_revenue,
        text=report.text,
    )
