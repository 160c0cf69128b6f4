from __future__ import annotations

from decimal import Decimal

from salon_booking.domain.entities.catalog_config import CatalogConfig
from salon_booking.domain.entities.service import Service


DEFAULT_SERVICES: tuple[Service, ...] = (
    Service(code="corte", description="Corte", price=Decimal("30.00")),
    Service(code="barba", description="Barba", price=Decimal("20.00")),
    Service(code="corte_barba", description="Corte + Barba", price=Decimal("45.00")),
    Service(code="sobrancelha", description="Sobrancelha", price=Decimal("10.00")),
    Service(code="pigmentacao", description="Pigmentação", price=Decimal("25.00")),
    Service(code="hidratacao", description="Hidratação", price=Decimal("35.00")),
)

DEFAULT_STAFF: tuple[str, ...] = ("Lucas", "Rafael", "Bruno")

DEFAULT_TIME_SLOTS: tuple[str, ...] = (
    "09:00",
    "10:00",
    "11:00",
    "13:00",
    "14:00",
    "15:00",
    "16:00",
    "17:00",
)


def build_default_catalog_config() -> CatalogConfig:
    return CatalogConfig(
        services=DEFAULT_SERVICES,
        staff=DEFAULT_STAFF,
        time_slots=DEFAULT_TIME_SLOTS,
    )
