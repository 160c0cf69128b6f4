from __future__ import annotations

import logging
from decimal import Decimal

from salon_booking.application.ports.activity_log import ActivityLogPort
from salon_booking.application.utils.report_text import build_daily_report
from salon_booking.domain.entities.booking import Booking


class MemoryActivityLog(ActivityLogPort):
    def __init__(self, currency_symbol: str = "R$", report_title: str = "Daily report") -> None:
        self._completed: list[Booking] = []
        self._cancellations: list[Booking] = []
        self._currency_symbol = currency_symbol
        self._report_title = report_title
        self._logger = logging.getLogger(__name__)

    def record_booking(self, booking: Booking) -> None:
        self._completed.append(booking)
        self._logger.debug("Booking recorded", extra={"reference": booking.reference})

    def record_cancellation(self, booking: Booking) -> None:
        self._cancellations.append(booking)
        self._logger.debug("Cancellation recorded", extra={"reference": booking.reference})

    def completed_bookings(self) -> tuple[Booking, ...]:
        return tuple(self._completed)

    def cancellations(self) -> tuple[Booking, ...]:
        return tuple(self._cancellations)

    def total_revenue(self) -> Decimal:
        total = Decimal("0")
        for booking in self._completed:
            if booking in self._cancellations:
                continue
            total += booking.total_price
        return total

    def render(self) -> str:
        return build_daily_report(
            completed=self.completed_bookings(),
            cancellations=self.cancellations(),
            total_revenue=self.total_revenue(),
            currency_symbol=self._currency_symbol,
            title=self._report_title,
        )
