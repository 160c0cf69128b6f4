from __future__ import annotations

import logging
import threading

from salon_booking.application.ports.ledger import BookingLedgerPort
from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.catalog_config import CatalogConfig
from salon_booking.domain.entities.ledger_entry import LedgerEntry


class InMemoryBookingLedger(BookingLedgerPort):
    """
    Slot x staff grid holding at most one booking per cell.

    Every write goes through book/cancel, which check and set the cell while
    holding the grid lock, so two callers can never both see an empty cell
    and both fill it.
    """

    def __init__(self, config: CatalogConfig) -> None:
        self._time_slots = config.time_slots
        self._staff = config.staff
        self._slot_index = {slot: i for i, slot in enumerate(self._time_slots)}
        self._staff_index = {name: i for i, name in enumerate(self._staff)}
        self._grid: list[list[Booking | None]] = [
            [None for _ in self._staff] for _ in self._time_slots
        ]
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def index_of_slot(self, slot: str) -> int | None:
        return self._slot_index.get(slot)

    def index_of_staff(self, staff: str) -> int | None:
        return self._staff_index.get(staff)

    def book(self, slot: str, day: str, staff: str, booking: Booking) -> bool:
        slot_idx = self.index_of_slot(slot)
        staff_idx = self.index_of_staff(staff)
        if slot_idx is None or staff_idx is None:
            self._logger.info(
                "Ledger lookup failed",
                extra={"slot": slot, "staff": staff, "day": day, "reason": "not_found"},
            )
            return False
        if booking.slot != slot or booking.staff != staff:
            self._logger.info(
                "Booking does not match ledger cell",
                extra={"slot": slot, "staff": staff, "day": day, "reason": "mismatch"},
            )
            return False

        with self._lock:
            if self._grid[slot_idx][staff_idx] is not None:
                self._logger.info(
                    "Ledger cell already occupied",
                    extra={"slot": slot, "staff": staff, "day": day, "reason": "conflict"},
                )
                return False
            self._grid[slot_idx][staff_idx] = booking

        self._logger.info(
            "Ledger cell booked",
            extra={"reference": booking.reference, "slot": slot, "staff": staff, "day": day},
        )
        return True

    def cancel(self, slot: str, day: str, staff: str, expected: Booking | None = None) -> Booking | None:
        slot_idx = self.index_of_slot(slot)
        staff_idx = self.index_of_staff(staff)
        if slot_idx is None or staff_idx is None:
            return None

        with self._lock:
            removed = self._grid[slot_idx][staff_idx]
            if removed is None:
                return None
            if expected is not None and removed is not expected:
                self._logger.info(
                    "Ledger cell holds a different booking",
                    extra={"slot": slot, "staff": staff, "day": day, "reason": "stale"},
                )
                return None
            self._grid[slot_idx][staff_idx] = None

        self._logger.info(
            "Ledger cell cleared",
            extra={"reference": removed.reference, "slot": slot, "staff": staff, "day": day},
        )
        return removed

    def has_any_booking(self) -> bool:
        with self._lock:
            return any(cell is not None for row in self._grid for cell in row)

    def all_bookings(self) -> list[LedgerEntry]:
        entries: list[LedgerEntry] = []
        with self._lock:
            for slot_idx, row in enumerate(self._grid):
                for staff_idx, cell in enumerate(row):
                    if cell is not None:
                        entries.append(
                            LedgerEntry(
                                slot=self._time_slots[slot_idx],
                                staff=self._staff[staff_idx],
                                booking=cell,
                            )
                        )
        return entries

