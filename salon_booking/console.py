"""
Interactive console menu (no HTTP).

Usage:
  salon-console
  python -m salon_booking.console

What it does:
- Asks for a role (client or staff) and its password
- Clients can list services, see availability, book and cancel their own bookings
- Staff can list every active booking, cancel any of them and print the daily report

Input is always parsed and range-checked here; the booking core only ever
receives well-formed values.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable

from salon_booking.application.ports.catalog import CatalogPort
from salon_booking.application.use_cases.availability import AvailabilityUseCase
from salon_booking.application.use_cases.booking import BookingUseCase
from salon_booking.application.use_cases.cancellation import CancellationResult, CancellationUseCase
from salon_booking.application.use_cases.report import ReportUseCase
from salon_booking.application.utils.report_text import describe_booking, format_money
from salon_booking.core.config import settings
from salon_booking.core.log_config import configure_logging
from salon_booking.domain.entities.customer import Customer
from salon_booking.domain.entities.ledger_entry import LedgerEntry
from salon_booking.domain.entities.payment_method import PaymentMethod
from salon_booking.infrastructure.auth.credentials import Role, authenticate


InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsoleApp:
    def __init__(
        self,
        catalog: CatalogPort,
        booking: BookingUseCase,
        cancellation: CancellationUseCase,
        availability: AvailabilityUseCase,
        report: ReportUseCase,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        client_secret: str = "123",
        staff_secret: str = "1234",
        currency_symbol: str = "R$",
    ) -> None:
        self._catalog = catalog
        self._booking = booking
        self._cancellation = cancellation
        self._availability = availability
        self._report = report
        self._input = input_fn
        self._out = output_fn
        self._client_secret = client_secret
        self._staff_secret = staff_secret
        self._currency = currency_symbol

    def run(self) -> None:
        try:
            self._main_menu()
        except (EOFError, KeyboardInterrupt):
            self._out("\nBye!")

    # Menus

    def _main_menu(self) -> None:
        while True:
            self._out("")
            self._out("=== Main menu ===")
            self._out("1 - Client area")
            self._out("2 - Staff area")
            self._out("0 - Exit")
            choice = self._ask_option(2)
            if choice == 0:
                self._out("Bye!")
                return
            role = Role.client if choice == 1 else Role.staff
            if not self._login(role):
                self._out("Invalid password.")
                continue
            if role == Role.client:
                self._client_menu()
            else:
                self._staff_menu()

    def _login(self, role: Role) -> bool:
        secret = self._input("Password: ")
        return authenticate(role.value, secret, self._client_secret, self._staff_secret)

    def _client_menu(self) -> None:
        actions = {
            1: self._show_services,
            2: self._show_availability,
            3: self._book,
            4: self._cancel_own,
        }
        while True:
            self._out("")
            self._out("=== Client menu ===")
            self._out("1 - List services")
            self._out("2 - Show availability")
            self._out("3 - Book appointment")
            self._out("4 - Cancel my booking")
            self._out("0 - Back")
            choice = self._ask_option(len(actions))
            if choice == 0:
                return
            actions[choice]()

    def _staff_menu(self) -> None:
        actions = {
            1: self._show_all_bookings,
            2: self._cancel_any,
            3: self._show_report,
        }
        while True:
            self._out("")
            self._out("=== Staff menu ===")
            self._out("1 - List bookings")
            self._out("2 - Cancel a booking")
            self._out("3 - Daily report")
            self._out("0 - Back")
            choice = self._ask_option(len(actions))
            if choice == 0:
                return
            actions[choice]()

    # Client actions

    def _show_services(self) -> None:
        self._out("Services:")
        for service in self._catalog.list_services():
            self._out(f"  [{service.code}] {service.description} - {format_money(service.price, self._currency)}")

    def _show_availability(self) -> None:
        self._out("Availability:")
        for row in self._availability.grid():
            free = ", ".join(row.free_staff) or "(fully booked)"
            self._out(f"  {row.slot}: {free}")

    def _book(self) -> None:
        customer = self._ask_customer()

        slots = self._catalog.list_time_slots()
        slot = slots[self._ask_choice("Time slot", slots) - 1]
        day = self._input("Day: ").strip()
        staff_names = self._catalog.list_staff()
        staff = staff_names[self._ask_choice("Staff member", staff_names) - 1]

        self._show_services()
        raw_codes = self._input("Service codes (comma separated): ")
        codes = [code.strip() for code in raw_codes.split(",") if code.strip()]

        methods = self._catalog.list_payment_methods()
        payment_method = methods[self._ask_choice("Payment method", methods) - 1]
        tendered = None
        if payment_method == PaymentMethod.cash:
            tendered = self._ask_amount("Amount tendered: ")

        result = self._booking.book(
            customer=customer,
            slot=slot,
            day=day,
            staff=staff,
            service_codes=codes,
            payment_method=payment_method,
            tendered=tendered,
        )
        if result.error is not None:
            self._out(f"Booking failed: {result.error.message}.")
            return

        self._out(f"Booked! Reference {result.booking.reference}.")
        self._out(f"Total: {format_money(result.total, self._currency)}")
        if result.change is not None:
            self._out(f"Change: {format_money(result.change, self._currency)}")
        if result.pix_code:
            self._out(f"Pix code: {result.pix_code}")

    def _cancel_own(self) -> None:
        customer = self._ask_customer()
        entries = self._cancellation.list_cancelable(customer)
        if not entries:
            self._out("You have no bookings.")
            return
        self._print_entries(entries)
        position = self._ask_int("Booking number: ")
        result = self._cancellation.cancel_by_position(position, customer)
        self._print_cancellation(result)

    # Staff actions

    def _show_all_bookings(self) -> None:
        entries = self._cancellation.list_cancelable()
        if not entries:
            self._out("No bookings.")
            return
        self._print_entries(entries)

    def _cancel_any(self) -> None:
        entries = self._cancellation.list_cancelable()
        if not entries:
            self._out("No bookings.")
            return
        self._print_entries(entries)
        position = self._ask_int("Booking number: ")
        result = self._cancellation.cancel_by_position(position)
        self._print_cancellation(result)

    def _show_report(self) -> None:
        self._out(self._report.daily_report().text)

    # Helpers

    def _print_entries(self, entries: list[LedgerEntry]) -> None:
        for i, entry in enumerate(entries, start=1):
            self._out(f"  {i}. {describe_booking(entry.booking)}")

    def _print_cancellation(self, result: CancellationResult) -> None:
        if result.error is not None:
            self._out(f"Cancellation failed: {result.error.message}.")
            return
        self._out(f"Cancelled: {describe_booking(result.booking)}")

    def _ask_customer(self) -> Customer:
        name = self._ask_text("Name: ")
        phone = self._ask_text("Phone: ")
        return Customer(name=name, phone=phone)

    def _ask_text(self, prompt: str) -> str:
        while True:
            value = self._input(prompt).strip()
            if value:
                return value
            self._out("This field is required.")

    def _ask_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._out("Please enter a number.")

    def _ask_option(self, highest: int) -> int:
        while True:
            choice = self._ask_int("> ")
            if 0 <= choice <= highest:
                return choice
            self._out("Invalid option.")

    def _ask_choice(self, label: str, options: tuple[str, ...]) -> int:
        """Numbered pick from options; re-asks until the number is in range. Returns 1-based."""
        self._out(f"{label}:")
        for i, option in enumerate(options, start=1):
            self._out(f"  {i} - {option}")
        while True:
            choice = self._ask_int(f"{label} number: ")
            if 1 <= choice <= len(options):
                return choice
            self._out("Invalid option.")

    def _ask_amount(self, prompt: str) -> Decimal:
        while True:
            raw = self._input(prompt).strip().replace(",", ".")
            try:
                amount = Decimal(raw)
            except InvalidOperation:
                self._out("Please enter an amount.")
                continue
            if amount.is_finite() and amount >= 0:
                return amount
            self._out("Please enter an amount.")


def main() -> None:
    from salon_booking.wiring.dependencies import get_container

    configure_logging(settings.LOG_LEVEL)
    container = get_container()
    ConsoleApp(
        catalog=container["catalog"],
        booking=container["booking"],
        cancellation=container["cancellation"],
        availability=container["availability"],
        report=container["report"],
        client_secret=settings.CLIENT_SECRET,
        staff_secret=settings.STAFF_SECRET,
        currency_symbol=settings.CURRENCY_SYMBOL,
    ).run()


if __name__ == "__main__":
    main()
