from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from salon_booking.application.ports.activity_log import ActivityLogPort
from salon_booking.domain.entities.booking import Booking


@dataclass(frozen=True)
class DailyReport:
    completed: tuple[Booking, ...]
    cancellations: tuple[Booking, ...]
    total_revenue: Decimal
    text: str


class ReportUseCase:
    def __init__(self, activity_log: ActivityLogPort) -> None:
        self._activity_log = activity_log

    def daily_report(self) -> DailyReport:
        return DailyReport(
            completed=self._activity_log.completed_bookings(),
            cancellations=self._activity_log.cancellations(),
            total_revenue=self._activity_log.total_revenue(),
            text=self._activity_log.render(),
        )
