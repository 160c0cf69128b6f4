from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from salon_booking.domain.entities.booking import Booking


class ActivityLogPort(ABC):
    @abstractmethod
    def record_booking(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def record_cancellation(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    def completed_bookings(self) -> tuple[Booking, ...]:
        raise NotImplementedError

    @abstractmethod
    def cancellations(self) -> tuple[Booking, ...]:
        raise NotImplementedError

    @abstractmethod
    def total_revenue(self) -> Decimal:
        """
        Sum of service prices over recorded bookings.
        Bookings equal to any recorded cancellation are left out.
        """
        raise NotImplementedError

    @abstractmethod
    def render(self) -> str:
        raise NotImplementedError
