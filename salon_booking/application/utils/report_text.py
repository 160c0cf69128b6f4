from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from salon_booking.domain.entities.booking import Booking

_CENTS = Decimal("0.01")


def format_money(amount: Decimal, currency_symbol: str) -> str:
    return f"{currency_symbol} {amount.quantize(_CENTS)}"


def describe_booking(booking: Booking) -> str:
    """One-line summary, e.g. '09:00 (01/01) - Lucas - Ana (111)'."""
    return (
        f"{booking.slot} ({booking.day}) - {booking.staff} - "
        f"{booking.customer.name} ({booking.customer.phone})"
    )


def build_daily_report(
    completed: Sequence[Booking],
    cancellations: Sequence[Booking],
    total_revenue: Decimal,
    currency_symbol: str,
    title: str = "Daily report",
) -> str:
    """Build the daily report text from the activity log sequences."""
    lines = [f"=== {title} ===", "", "Completed bookings:"]
    if not completed:
        lines.append("  (none)")
    for i, booking in enumerate(completed, start=1):
        services = ", ".join(service.description for service in booking.services)
        marker = " [cancelled]" if booking in cancellations else ""
        lines.append(
            f"  {i}. {describe_booking(booking)} - {services} - {booking.payment_method} - "
            f"{format_money(booking.total_price, currency_symbol)}{marker}"
        )

    lines.extend(["", "Cancellations:"])
    if not cancellations:
        lines.append("  (none)")
    for i, booking in enumerate(cancellations, start=1):
        lines.append(f"  {i}. {describe_booking(booking)}")
        for service in booking.services:
            lines.append(f"     - {service.description}: {format_money(service.price, currency_symbol)}")

    lines.extend(["", f"Total revenue: {format_money(total_revenue, currency_symbol)}"])
    return "\n".join(lines)
