from __future__ import annotations

from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.domain.entities.catalog_config import CatalogConfig
from salon_booking.domain.entities.service import Service


class StaticCatalog(CatalogPort):
    def __init__(self, config: CatalogConfig) -> None:
        self._config = config
        self._services_by_code = {service.code: service for service in config.services}

    @property
    def config(self) -> CatalogConfig:
        return self._config

    def list_services(self) -> tuple[Service, ...]:
        return self._config.services

    def find_service(self, code: str) -> Service | None:
        return self._services_by_code.get(code.strip())

    def list_staff(self) -> tuple[str, ...]:
        return self._config.staff

    def list_time_slots(self) -> tuple[str, ...]:
        return self._config.time_slots

    def list_payment_methods(self) -> tuple[str, ...]:
        return self._config.payment_methods

    def has_payment_method(self, label: str) -> bool:
        return label in self._config.payment_methods
