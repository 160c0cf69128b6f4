from __future__ import annotations

import logging
from dataclasses import dataclass

from salon_booking.application.errors import BookingError
from salon_booking.application.ports.activity_log import ActivityLogPort
from salon_booking.application.ports.ledger import BookingLedgerPort
from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.ledger_entry import LedgerEntry


@dataclass(frozen=True)
class CancellationResult:
    action: str  # "cancelled", "rejected"
    booking: Booking | None = None
    error: BookingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CancellationUseCase:
    """Cancel active bookings, directly or by their position in the listing."""

    def __init__(self, ledger: BookingLedgerPort, activity_log: ActivityLogPort) -> None:
        self._ledger = ledger
        self._activity_log = activity_log
        self._logger = logging.getLogger(__name__)

    def list_cancelable(self, customer: Customer | None = None) -> list[LedgerEntry]:
        """
        Active bookings in ledger scan order, optionally only the given customer's.
        Positions used by cancel_by_position are 1-based indexes into this list.
        """
        entries = self._ledger.all_bookings()
        if customer is None:
            return entries
        return [entry for entry in entries if entry.booking.customer == customer]

    def cancel_by_position(self, position: int, customer: Customer | None = None) -> CancellationResult:
        entries = self.list_cancelable(customer)
        if not 1 <= position <= len(entries):
            self._logger.info(
                "Cancellation rejected",
                extra={"position": position, "reason": BookingError.invalid_selection.value},
            )
            return CancellationResult(action="rejected", error=BookingError.invalid_selection)

        entry = entries[position - 1]
        # The cell may have changed since listing; only remove the listed booking.
        return self._cancel(entry.slot, entry.booking.day, entry.staff, expected=entry.booking)

    def cancel(self, slot: str, day: str, staff: str) -> CancellationResult:
        return self._cancel(slot, day, staff)

    def _cancel(self, slot: str, day: str, staff: str, expected: Booking | None = None) -> CancellationResult:
        if self._ledger.index_of_slot(slot) is None or self._ledger.index_of_staff(staff) is None:
            return self._reject(BookingError.not_found, slot, staff)

        removed = self._ledger.cancel(slot, day, staff, expected=expected)
        if removed is None:
            return self._reject(BookingError.empty_cell, slot, staff)

        self._activity_log.record_cancellation(removed)
        self._logger.info(
            "Booking cancelled",
            extra={
                "reference": removed.reference,
                "slot": slot,
                "staff": staff,
                "day": removed.day,
                "customer": removed.customer.name,
            },
        )
        return CancellationResult(action="cancelled", booking=removed)

    def _reject(self, error: BookingError, slot: str, staff: str) -> CancellationResult:
        self._logger.info(
            "Cancellation rejected",
            extra={"slot": slot, "staff": staff, "reason": error.value},
        )
        return CancellationResult(action="rejected", error=error)
