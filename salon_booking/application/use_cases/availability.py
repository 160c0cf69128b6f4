from __future__ import annotations

from dataclasses import dataclass

from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.ports.ledger import BookingLedgerPort


@dataclass(frozen=True)
class StaffAvailability:
    staff: str
    available: bool


@dataclass(frozen=True)
class SlotAvailability:
    slot: str
    staff: tuple[StaffAvailability, ...]

    @property
    def free_staff(self) -> tuple[str, ...]:
        return tuple(item.staff for item in self.staff if item.available)


class AvailabilityUseCase:
    def __init__(self, catalog: CatalogPort, ledger: BookingLedgerPort) -> None:
        self._catalog = catalog
        self._ledger = ledger

    def grid(self) -> list[SlotAvailability]:
        """Free/taken status of every (slot, staff) cell, in catalog order."""
        taken = {(entry.slot, entry.staff) for entry in self._ledger.all_bookings()}
        return [
            SlotAvailability(
                slot=slot,
                staff=tuple(
                    StaffAvailability(staff=name, available=(slot, name) not in taken)
                    for name in self._catalog.list_staff()
                ),
            )
            for slot in self._catalog.list_time_slots()
        ]
