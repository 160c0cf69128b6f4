from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal

from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.service import Service


def _new_reference() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class Booking:
    customer: Customer
    slot: str
    day: str  # free text, never used for conflict detection
    services: tuple[Service, ...]
    staff: str
    payment_method: str
    # Display label only; equality stays on the booking details.
    reference: str = field(default_factory=_new_reference, compare=False)

    @property
    def total_price(self) -> Decimal:
        return sum((service.price for service in self.services), Decimal("0"))
