"""
Tests for the slot x staff booking grid.
"""

from __future__ import annotations

import random
import threading

from salon_booking.domain.entities.catalog_config import CatalogConfig

from conftest import make_booking


def _assert_single_booking_per_cell(ledger) -> None:
    cells = [(entry.slot, entry.staff) for entry in ledger.all_bookings()]
    assert len(cells) == len(set(cells))


def test_book_then_conflict_keeps_first_record(ledger):
    """A second booking for the same slot and staff is refused, whatever the day."""
    first = make_booking(name="Ana", day="01/01")
    second = make_booking(name="Bia", day="02/01")

    assert ledger.book("09:00", "01/01", "Lucas", first) is True
    assert ledger.book("09:00", "02/01", "Lucas", second) is False

    entries = ledger.all_bookings()
    assert len(entries) == 1
    assert entries[0].booking == first


def test_book_unknown_slot_or_staff_fails_without_mutation(ledger):
    booking = make_booking()
    assert ledger.book("08:00", "01/01", "Lucas", booking) is False
    assert ledger.book("09:00", "01/01", "Pedro", booking) is False
    assert ledger.has_any_booking() is False


def test_cancel_returns_booked_record_once(ledger):
    booking = make_booking()
    ledger.book("09:00", "01/01", "Lucas", booking)

    assert ledger.cancel("09:00", "01/01", "Lucas") == booking
    assert ledger.cancel("09:00", "01/01", "Lucas") is None
    assert ledger.has_any_booking() is False


def test_cancel_unknown_slot_returns_none(ledger):
    assert ledger.cancel("23:00", "01/01", "Lucas") is None


def test_cell_is_reusable_after_cancel(ledger):
    ledger.book("09:00", "01/01", "Lucas", make_booking(name="Ana"))
    ledger.cancel("09:00", "01/01", "Lucas")
    assert ledger.book("09:00", "01/01", "Lucas", make_booking(name="Bia")) is True


def test_all_bookings_scan_order_is_slot_major(ledger):
    """Entries come slot by slot, staff in catalog order within a slot."""
    ledger.book("10:00", "", "Lucas", make_booking(name="C", slot="10:00"))
    ledger.book("09:00", "", "Rafael", make_booking(name="B", staff="Rafael"))
    ledger.book("09:00", "", "Lucas", make_booking(name="A"))

    order = [(e.slot, e.staff, e.booking.customer.name) for e in ledger.all_bookings()]
    assert order == [
        ("09:00", "Lucas", "A"),
        ("09:00", "Rafael", "B"),
        ("10:00", "Lucas", "C"),
    ]
    # Computing it again gives the same numbering.
    assert order == [(e.slot, e.staff, e.booking.customer.name) for e in ledger.all_bookings()]


def test_index_lookups(ledger):
    assert ledger.index_of_slot("09:00") == 0
    assert ledger.index_of_slot("11:00") == 2
    assert ledger.index_of_slot("9:00") is None
    assert ledger.index_of_staff("Rafael") == 1
    assert ledger.index_of_staff("lucas") is None


def test_random_operations_never_double_book(ledger, catalog_config: CatalogConfig):
    """Brute-force check of the one-booking-per-cell rule."""
    rng = random.Random(1234)
    slots = list(catalog_config.time_slots) + ["12:00"]
    staff = list(catalog_config.staff) + ["Pedro"]
    for i in range(300):
        slot = rng.choice(slots)
        name = rng.choice(staff)
        if rng.random() < 0.7:
            ledger.book(slot, str(i), name, make_booking(name=f"c{i}", slot=slot, staff=name))
        else:
            ledger.cancel(slot, str(i), name)
        _assert_single_booking_per_cell(ledger)


def test_concurrent_book_allows_only_one_winner(ledger):
    """Many threads racing for one cell: exactly one succeeds."""
    results: list[bool] = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(16)

    def worker(i: int) -> None:
        barrier.wait()
        ok = ledger.book("11:00", "", "Rafael", make_booking(name=f"c{i}", slot="11:00", staff="Rafael"))
        with results_lock:
            results.append(ok)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count(True) == 1
    assert len(ledger.all_bookings()) == 1


def test_cancel_with_expected_only_clears_that_booking(ledger):
    ana = make_booking(name="Ana")
    bia = make_booking(name="Bia")
    ledger.book("09:00", "01/01", "Lucas", bia)

    assert ledger.cancel("09:00", "01/01", "Lucas", expected=ana) is None
    assert ledger.all_bookings()[0].booking is bia
    assert ledger.cancel("09:00", "01/01", "Lucas", expected=bia) is bia
    assert ledger.has_any_booking() is False


def test_book_rejects_record_for_another_cell(ledger):
    """The stored booking must describe the cell it is written to."""
    assert ledger.book("10:00", "", "Lucas", make_booking(slot="09:00", staff="Lucas")) is False
    assert ledger.book("09:00", "", "Rafael", make_booking(slot="09:00", staff="Lucas")) is False
    assert ledger.has_any_booking() is False
