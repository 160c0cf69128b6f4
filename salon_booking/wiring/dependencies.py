from functools import lru_cache

from salon_booking.application.ports.activity_log import ActivityLogPort
from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.ports.ledger import BookingLedgerPort
from salon_booking.application.use_cases.availability import AvailabilityUseCase
from salon_booking.application.use_cases.booking import BookingUseCase
from salon_booking.application.use_cases.cancellation import CancellationUseCase
from salon_booking.application.use_cases.report import ReportUseCase
from salon_booking.core.config import settings
from salon_booking.domain.entities.catalog_config import CatalogConfig
from salon_booking.infrastructure.activity.memory_activity_log import MemoryActivityLog
from salon_booking.infrastructure.catalog.catalog_data import build_default_catalog_config
from salon_booking.infrastructure.catalog.catalog_store import StaticCatalog
from salon_booking.infrastructure.ledger.memory_ledger import InMemoryBookingLedger


# Process-lifetime state: one catalog, one ledger, one activity log.


@lru_cache
def get_catalog_config() -> CatalogConfig:
    return build_default_catalog_config()


@lru_cache
def get_catalog() -> CatalogPort:
    return StaticCatalog(get_catalog_config())


@lru_cache
def get_ledger() -> BookingLedgerPort:
    return InMemoryBookingLedger(get_catalog_config())


@lru_cache
def get_activity_log() -> ActivityLogPort:
    return MemoryActivityLog(
        currency_symbol=settings.CURRENCY_SYMBOL,
        report_title=f"{settings.BUSINESS_NAME} - Daily report",
    )


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        catalog=get_catalog(),
        ledger=get_ledger(),
        activity_log=get_activity_log(),
        pix_payment_code=settings.PIX_PAYMENT_CODE,
    )


def get_cancellation_use_case() -> CancellationUseCase:
    return CancellationUseCase(ledger=get_ledger(), activity_log=get_activity_log())


def get_availability_use_case() -> AvailabilityUseCase:
    return AvailabilityUseCase(catalog=get_catalog(), ledger=get_ledger())


def get_report_use_case() -> ReportUseCase:
    return ReportUseCase(activity_log=get_activity_log())


def reset_state() -> None:
    """Drop the shared state so the next call builds fresh instances."""
    for factory in (get_catalog_config, get_catalog, get_ledger, get_activity_log):
        factory.cache_clear()


def get_container() -> dict[str, object]:
    return {
        "catalog": get_catalog(),
        "booking": get_booking_use_case(),
        "cancellation": get_cancellation_use_case(),
        "availability": get_availability_use_case(),
        "report": get_report_use_case(),
    }
