from __future__ import annotations

from fastapi import HTTPException

from salon_booking.application.errors import BookingError


_STATUS_CODES = {
    BookingError.not_found: 404,
    BookingError.empty_cell: 404,
    BookingError.conflict: 409,
    BookingError.invalid_selection: 400,
    BookingError.empty_selection: 400,
    BookingError.insufficient_payment: 400,
}


def raise_for_booking_error(error: BookingError) -> None:
    raise HTTPException(
        status_code=_STATUS_CODES[error],
        detail={"error": error.value, "message": error.message},
    )
