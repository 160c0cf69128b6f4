from enum import Enum


class BookingError(str, Enum):
    """Recoverable booking failures; returned in results, never raised."""

    not_found = "not_found"
    conflict = "conflict"
    empty_cell = "empty_cell"
    invalid_selection = "invalid_selection"
    insufficient_payment = "insufficient_payment"
    empty_selection = "empty_selection"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    BookingError.not_found: "No such time slot, staff member or service",
    BookingError.conflict: "This staff member is already booked at this time slot",
    BookingError.empty_cell: "There is no booking at this time slot for this staff member",
    BookingError.invalid_selection: "Selection is out of range",
    BookingError.insufficient_payment: "Amount tendered is less than the total due",
    BookingError.empty_selection: "At least one service must be selected",
}
