"""Domain error codes for the bookings module.

Every rejection here is an expected business outcome. Services raise these
errors and handlers map them to responses; none of them signals a fault.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    SLOT_NOT_FOUND = "SLOT_NOT_FOUND"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    INVALID_SLOT_ID = "INVALID_SLOT_ID"
    STRIKE_LIMIT_REACHED = "STRIKE_LIMIT_REACHED"
    SLOT_UNAVAILABLE = "SLOT_UNAVAILABLE"
    OUTSIDE_BOOKING_HORIZON = "OUTSIDE_BOOKING_HORIZON"
    NO_ELIGIBLE_BOOKING = "NO_ELIGIBLE_BOOKING"
    OUTSIDE_CHECK_IN_WINDOW = "OUTSIDE_CHECK_IN_WINDOW"
    BOOKING_ALREADY_RESOLVED = "BOOKING_ALREADY_RESOLVED"
    BOOKING_ALREADY_STARTED = "BOOKING_ALREADY_STARTED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """An unknown room, booking or slot was referenced."""


class PolicyViolationError(DomainError):
    """A booking rule rejected the operation."""


class InvalidStateError(DomainError):
    """The booking is in a state that does not allow the operation."""


class RoomNotFoundError(NotFoundError):
    """Raised when a room id or QR token matches no room."""

    def __init__(self, room_ref: str) -> None:
        super().__init__(
            code=ErrorCode.ROOM_NOT_FOUND,
            message="Room not found",
        )
        self.room_ref = room_ref


class BookingNotFoundError(NotFoundError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class SlotNotFoundError(NotFoundError):
    """Raised when a slot id is not one of the day's slots for the room."""

    def __init__(self, slot_id: str) -> None:
        super().__init__(
            code=ErrorCode.SLOT_NOT_FOUND,
            message="Time slot not found for this room and date",
        )
        self.slot_id = slot_id


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class InvalidSlotIdError(DomainError):
    """Raised when a slot ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SLOT_ID,
            message="Invalid time slot ID format",
        )


class StrikeLimitReachedError(PolicyViolationError):
    """Raised when the user has too many strikes to book a room."""

    def __init__(self, strikes: int, threshold: int) -> None:
        super().__init__(
            code=ErrorCode.STRIKE_LIMIT_REACHED,
            message=f"You cannot make new bookings until your strikes are below {threshold}",
        )
        self.strikes = strikes
        self.threshold = threshold


class SlotUnavailableError(PolicyViolationError):
    """Raised when the requested slot is already taken."""

    def __init__(self, slot_id: str) -> None:
        super().__init__(
            code=ErrorCode.SLOT_UNAVAILABLE,
            message="Time slot is no longer available",
        )
        self.slot_id = slot_id


class OutsideBookingHorizonError(PolicyViolationError):
    """Raised when the booking date is in the past or too far ahead."""

    def __init__(self, horizon_days: int) -> None:
        super().__init__(
            code=ErrorCode.OUTSIDE_BOOKING_HORIZON,
            message=f"Rooms can be booked from today up to {horizon_days} days ahead",
        )
        self.horizon_days = horizon_days


class NoEligibleBookingError(PolicyViolationError):
    """Raised when a room scan finds no booking inside its check-in window."""

    def __init__(self, room_id: str) -> None:
        super().__init__(
            code=ErrorCode.NO_ELIGIBLE_BOOKING,
            message="You don't have an active booking for this room within the check-in window",
        )
        self.room_id = room_id


class OutsideCheckInWindowError(PolicyViolationError):
    """Raised when checking in before the window opens or after the booking ends."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.OUTSIDE_CHECK_IN_WINDOW,
            message="Check-in is not open for this booking right now",
        )
        self.booking_id = booking_id


class BookingAlreadyResolvedError(InvalidStateError):
    """Raised when a checked-in, missed or cancelled booking would change again."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_ALREADY_RESOLVED,
            message="Booking is already checked in, missed or cancelled",
        )
        self.booking_id = booking_id


class BookingAlreadyStartedError(InvalidStateError):
    """Raised when cancelling a booking whose start time has passed."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_ALREADY_STARTED,
            message="Booking has already started and can no longer be cancelled",
        )
        self.booking_id = booking_id
