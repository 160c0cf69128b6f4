from __future__ import annotations

from decimal import Decimal

import pytest

from salon_booking.application.use_cases.availability import AvailabilityUseCase
from salon_booking.application.use_cases.booking import BookingUseCase
from salon_booking.application.use_cases.cancellation import CancellationUseCase
from salon_booking.application.use_cases.report import ReportUseCase
from salon_booking.domain.entities.booking import Booking
from salon_booking.domain.entities.catalog_config import CatalogConfig
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.service import Service
from salon_booking.infrastructure.activity.memory_activity_log import MemoryActivityLog
from salon_booking.infrastructure.catalog.catalog_store import StaticCatalog
from salon_booking.infrastructure.ledger.memory_ledger import InMemoryBookingLedger

PIX_CODE = "PIX-TEST-CODE"

CORTE = Service(code="corte", description="Corte", price=Decimal("30.00"))
BARBA = Service(code="barba", description="Barba", price=Decimal("50.00"))


def make_booking(
    name: str = "Ana",
    phone: str = "111",
    slot: str = "09:00",
    day: str = "01/01",
    staff: str = "Lucas",
    services: tuple[Service, ...] = (CORTE,),
    payment_method: str = "Pix",
) -> Booking:
    return Booking(
        customer=Customer(name=name, phone=phone),
        slot=slot,
        day=day,
        services=services,
        staff=staff,
        payment_method=payment_method,
    )


@pytest.fixture
def catalog_config() -> CatalogConfig:
    return CatalogConfig(
        services=(CORTE, BARBA),
        staff=("Lucas", "Rafael"),
        time_slots=("09:00", "10:00", "11:00"),
    )


@pytest.fixture
def catalog(catalog_config) -> StaticCatalog:
    return StaticCatalog(catalog_config)


@pytest.fixture
def ledger(catalog_config) -> InMemoryBookingLedger:
    return InMemoryBookingLedger(catalog_config)


@pytest.fixture
def activity_log() -> MemoryActivityLog:
    return MemoryActivityLog(currency_symbol="R$")


@pytest.fixture
def booking_use_case(catalog, ledger, activity_log) -> BookingUseCase:
    return BookingUseCase(catalog=catalog, ledger=ledger, activity_log=activity_log, pix_payment_code=PIX_CODE)


@pytest.fixture
def cancellation_use_case(ledger, activity_log) -> CancellationUseCase:
    return CancellationUseCase(ledger=ledger, activity_log=activity_log)


@pytest.fixture
def availability_use_case(catalog, ledger) -> AvailabilityUseCase:
    return AvailabilityUseCase(catalog=catalog, ledger=ledger)


@pytest.fixture
def report_use_case(activity_log) -> ReportUseCase:
    return ReportUseCase(activity_log=activity_log)
