from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from salon_booking.application.errors import BookingError
from salon_booking.application.ports.activity_log import ActivityLogPort
from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.ports.ledger import BookingLedgerPort
from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.payment_method import PaymentMethod
from salon_booking.domain.entities.service import Service


@dataclass(frozen=True)
class BookingResult:
    action: str  # "booked", "rejected"
    booking: Booking | None = None
    error: BookingError | None = None
    total: Decimal | None = None
    change: Decimal | None = None  # Cash only
    pix_code: str | None = None  # Pix only

    @property
    def ok(self) -> bool:
        return self.error is None


class BookingUseCase:
    def __init__(
        self,
        catalog: CatalogPort,
        ledger: BookingLedgerPort,
        activity_log: ActivityLogPort,
        pix_payment_code: str,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._activity_log = activity_log
        self._pix_payment_code = pix_payment_code
        self._logger = logging.getLogger(__name__)

    def book(
        self,
        customer: Customer,
        slot: str,
        day: str,
        staff: str,
        service_codes: Sequence[str],
        payment_method: str,
        tendered: Decimal | None = None,
    ) -> BookingResult:
        """
        Validate the request and reserve the (slot, staff) cell.

        The ledger and the activity log are only touched once every check,
        payment included, has passed.
        """
        if not service_codes:
            return self._reject(BookingError.empty_selection, customer, slot, staff)

        services: list[Service] = []
        for code in service_codes:
            service = self._catalog.find_service(code)
            if service is None:
                return self._reject(BookingError.not_found, customer, slot, staff)
            services.append(service)

        if self._ledger.index_of_slot(slot) is None or self._ledger.index_of_staff(staff) is None:
            return self._reject(BookingError.not_found, customer, slot, staff)

        if not self._catalog.has_payment_method(payment_method):
            return self._reject(BookingError.invalid_selection, customer, slot, staff)

        booking = Booking(
            customer=customer,
            slot=slot,
            day=day,
            services=tuple(services),
            staff=staff,
            payment_method=payment_method,
        )
        total = booking.total_price

        change = None
        if payment_method == PaymentMethod.cash:
            if tendered is None or tendered < total:
                return self._reject(BookingError.insufficient_payment, customer, slot, staff)
            change = tendered - total

        if not self._ledger.book(slot, day, staff, booking):
            return self._reject(BookingError.conflict, customer, slot, staff)

        self._activity_log.record_booking(booking)
        self._logger.info(
            "Booking created",
            extra={
                "reference": booking.reference,
                "slot": slot,
                "staff": staff,
                "day": day,
                "customer": customer.name,
            },
        )

        return BookingResult(
            action="booked",
            booking=booking,
            total=total,
            change=change,
            pix_code=self._pix_payment_code if payment_method == PaymentMethod.pix else None,
        )

    def _reject(self, error: BookingError, customer: Customer, slot: str, staff: str) -> BookingResult:
        self._logger.info(
            "Booking rejected",
            extra={"slot": slot, "staff": staff, "customer": customer.name, "reason": error.value},
        )
        return BookingResult(action="rejected", error=error)
