from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.service import Service


class CatalogPort(ABC):
    @abstractmethod
    def list_services(self) -> tuple[Service, ...]:
        raise NotImplementedError

    @abstractmethod
    def find_service(self, code: str) -> Service | None:
        """Get service by code. Returns None if the code is unknown."""
        raise NotImplementedError

    @abstractmethod
    def list_staff(self) -> tuple[str, ...]:
        raise NotImplementedError

    @abstractmethod
    def list_time_slots(self) -> tuple[str, ...]:
        raise NotImplementedError

    @abstractmethod
    def list_payment_methods(self) -> tuple[str, ...]:
        raise NotImplementedError

    @abstractmethod
    def has_payment_method(self, label: str) -> bool:
        raise NotImplementedError
