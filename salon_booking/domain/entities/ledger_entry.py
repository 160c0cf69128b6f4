from __future__ import annotations

from dataclasses import dataclass

from salon_booking.domain.entities.booking import Booking


@dataclass(frozen=True)
class LedgerEntry:
    slot: str
    staff: str
    booking: Booking
