from __future__ import annotations

from dataclasses import dataclass

from salon_booking.domain.entities.payment_method import PaymentMethod
from salon_booking.domain.entities.service import Service


@dataclass(frozen=True)
class CatalogConfig:
    """Fixed reference data the catalog and the ledger are built from."""

    services: tuple[Service, ...]
    staff: tuple[str, ...]
    time_slots: tuple[str, ...]
    payment_methods: tuple[str, ...] = tuple(method.value for method in PaymentMethod)

    def __post_init__(self) -> None:
        # Accept any iterable but always hold tuples.
        for name in ("services", "staff", "time_slots", "payment_methods"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        codes = [service.code for service in self.services]
        if len(set(codes)) != len(codes):
            raise ValueError("Duplicate service code in catalog")
        if any(service.price < 0 for service in self.services):
            raise ValueError("Service price must be non-negative")
        if len(set(self.staff)) != len(self.staff):
            raise ValueError("Duplicate staff name in catalog")
        if len(set(self.time_slots)) != len(self.time_slots):
            raise ValueError("Duplicate time slot in catalog")
        if len(set(self.payment_methods)) != len(self.payment_methods):
            raise ValueError("Duplicate payment method in catalog")
