from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.ledger_entry import LedgerEntry


class BookingLedgerPort(ABC):
    @abstractmethod
    def book(self, slot: str, day: str, staff: str, booking: Booking) -> bool:
        """
        Store booking in the (slot, staff) cell.
        Returns False without mutating anything if slot or staff is unknown,
        the booking describes a different slot or staff, or the cell is already occupied.
        """
        raise NotImplementedError

    @abstractmethod
    def cancel(self, slot: str, day: str, staff: str, expected: Booking | None = None) -> Booking | None:
        """
        Clear the (slot, staff) cell. Returns the removed booking, or None if there was none.
        With expected set, the cell is only cleared while it still holds that exact booking.
        """
        raise NotImplementedError

    @abstractmethod
    def has_any_booking(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def all_bookings(self) -> list[LedgerEntry]:
        """Active bookings in slot-major, then staff, order."""
        raise NotImplementedError

    @abstractmethod
    def index_of_slot(self, slot: str) -> int | None:
        raise NotImplementedError

    @abstractmethod
    def index_of_staff(self, staff: str) -> int | None:
        raise NotImplementedError
