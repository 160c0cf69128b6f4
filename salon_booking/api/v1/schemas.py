from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from salon_booking.application.use_cases.availability import SlotAvailability
from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.ledger_entry import LedgerEntry
from salon_booking.domain.entities.service import Service


class ServiceSchema(BaseModel):
    code: str
    description: str
    price: Decimal

    @classmethod
    def from_entity(cls, service: Service) -> "ServiceSchema":
        return cls(code=service.code, description=service.description, price=service.price)


class CatalogResponseSchema(BaseModel):
    services: list[ServiceSchema]
    staff: list[str]
    time_slots: list[str]
    payment_methods: list[str]


NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CustomerSchema(BaseModel):
    name: NonBlankStr
    phone: NonBlankStr

    def to_entity(self) -> Customer:
        return Customer(name=self.name, phone=self.phone)


class BookingRequestSchema(BaseModel):
    customer: CustomerSchema
    slot: str
    day: str = ""
    staff: str
    # Emptiness is reported as a booking error, not a validation error.
    services: list[str] = Field(default_factory=list)
    payment_method: str
    tendered: Decimal | None = None


class BookingSchema(BaseModel):
    reference: str
    customer: CustomerSchema
    slot: str
    day: str
    staff: str
    services: list[ServiceSchema]
    payment_method: str
    total: Decimal

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingSchema":
        return cls(
            reference=booking.reference,
            customer=CustomerSchema(name=booking.customer.name, phone=booking.customer.phone),
            slot=booking.slot,
            day=booking.day,
            staff=booking.staff,
            services=[ServiceSchema.from_entity(s) for s in booking.services],
            payment_method=booking.payment_method,
            total=booking.total_price,
        )


class BookingResponseSchema(BaseModel):
    booking: BookingSchema
    change: Decimal | None = None
    pix_code: str | None = None


class LedgerEntrySchema(BaseModel):
    position: int
    slot: str
    staff: str
    booking: BookingSchema


class CancellationResponseSchema(BaseModel):
    booking: BookingSchema


class SlotAvailabilitySchema(BaseModel):
    slot: str
    free_staff: list[str]
    taken_staff: list[str]

    @classmethod
    def from_entity(cls, row: SlotAvailability) -> "SlotAvailabilitySchema":
        return cls(
            slot=row.slot,
            free_staff=[item.staff for item in row.staff if item.available],
            taken_staff=[item.staff for item in row.staff if not item.available],
        )


class DailyReportSchema(BaseModel):
    completed: list[BookingSchema]
    cancellations: list[BookingSchema]
    total_revenue: Decimal
    text: str


def number_entries(entries: list[LedgerEntry]) -> list[LedgerEntrySchema]:
    return [
        LedgerEntrySchema(
            position=i,
            slot=entry.slot,
            staff=entry.staff,
            booking=BookingSchema.from_entity(entry.booking),
        )
        for i, entry in enumerate(entries, start=1)
    ]
