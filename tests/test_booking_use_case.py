"""
Tests for the booking use case: validation order, payment and side effects.
"""

from __future__ import annotations

from decimal import Decimal

from salon_booking.application.errors import BookingError
from salon_booking.domain.entities.customer import Customer

from conftest import PIX_CODE

ANA = Customer(name="Ana", phone="111")


def test_end_to_end_book_and_cancel(booking_use_case, cancellation_use_case, ledger, activity_log):
    """Ana books a Corte with Lucas at 09:00, then cancels it."""
    result = booking_use_case.book(
        customer=ANA,
        slot="09:00",
        day="01/01",
        staff="Lucas",
        service_codes=["corte"],
        payment_method="Pix",
    )
    assert result.ok
    assert result.action == "booked"
    assert len(ledger.all_bookings()) == 1
    assert activity_log.total_revenue() == Decimal("30.00")

    cancelled = cancellation_use_case.cancel("09:00", "01/01", "Lucas")
    assert cancelled.ok
    assert cancelled.booking == result.booking
    assert activity_log.total_revenue() == Decimal("0")
    assert result.booking in activity_log.cancellations()


def test_pix_returns_static_code(booking_use_case):
    result = booking_use_case.book(ANA, "09:00", "01/01", "Lucas", ["corte"], "Pix")
    assert result.pix_code == PIX_CODE
    assert result.change is None


def test_card_has_no_change_or_pix_code(booking_use_case):
    result = booking_use_case.book(ANA, "09:00", "01/01", "Lucas", ["corte", "barba"], "Credit Card")
    assert result.ok
    assert result.total == Decimal("80.00")
    assert result.change is None
    assert result.pix_code is None


def test_cash_returns_change(booking_use_case):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", ["corte"], "Cash", tendered=Decimal("50"))
    assert result.ok
    assert result.change == Decimal("20.00")


def test_cash_exact_amount_is_accepted(booking_use_case):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", ["corte"], "Cash", tendered=Decimal("30"))
    assert result.ok
    assert result.change == Decimal("0")


def test_insufficient_cash_leaves_no_trace(booking_use_case, ledger, activity_log):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", ["corte"], "Cash", tendered=Decimal("29.99"))
    assert result.error == BookingError.insufficient_payment
    assert result.booking is None
    assert ledger.has_any_booking() is False
    assert activity_log.completed_bookings() == ()


def test_cash_without_tender_is_insufficient(booking_use_case, ledger):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", ["corte"], "Cash")
    assert result.error == BookingError.insufficient_payment
    assert ledger.has_any_booking() is False


def test_empty_selection_rejected_before_ledger(booking_use_case, ledger, activity_log):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", [], "Pix")
    assert result.error == BookingError.empty_selection
    assert ledger.has_any_booking() is False
    assert activity_log.completed_bookings() == ()


def test_unknown_service_code_not_found(booking_use_case, ledger):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", ["corte", "massagem"], "Pix")
    assert result.error == BookingError.not_found
    assert ledger.has_any_booking() is False


def test_unknown_slot_or_staff_not_found(booking_use_case):
    assert booking_use_case.book(ANA, "07:00", "", "Lucas", ["corte"], "Pix").error == BookingError.not_found
    assert booking_use_case.book(ANA, "09:00", "", "Pedro", ["corte"], "Pix").error == BookingError.not_found


def test_unknown_payment_method_invalid_selection(booking_use_case, ledger):
    result = booking_use_case.book(ANA, "09:00", "", "Lucas", ["corte"], "Cheque")
    assert result.error == BookingError.invalid_selection
    assert ledger.has_any_booking() is False


def test_conflict_not_recorded(booking_use_case, ledger, activity_log):
    first = booking_use_case.book(ANA, "09:00", "01/01", "Lucas", ["corte"], "Pix")
    second = booking_use_case.book(
        Customer(name="Bia", phone="222"), "09:00", "05/01", "Lucas", ["barba"], "Pix"
    )

    assert first.ok
    assert second.error == BookingError.conflict
    assert [e.booking for e in ledger.all_bookings()] == [first.booking]
    assert activity_log.completed_bookings() == (first.booking,)


def test_duplicate_service_codes_kept_in_order(booking_use_case):
    result = booking_use_case.book(ANA, "10:00", "", "Rafael", ["barba", "corte", "barba"], "Debit Card")
    assert [s.code for s in result.booking.services] == ["barba", "corte", "barba"]
    assert result.total == Decimal("130.00")


def test_rebooking_cancelled_details_earns_nothing(booking_use_case, cancellation_use_case, activity_log):
    """Revenue exclusion compares booking details, so re-booking identical details stays excluded."""
    booking_use_case.book(ANA, "09:00", "01/01", "Lucas", ["corte"], "Pix")
    cancellation_use_case.cancel("09:00", "01/01", "Lucas")
    again = booking_use_case.book(ANA, "09:00", "01/01", "Lucas", ["corte"], "Pix")

    assert again.ok
    assert len(activity_log.completed_bookings()) == 2
    assert activity_log.total_revenue() == Decimal("0")
