"""Domain models for rooms, slots, bookings and the user.

Rooms and slots are immutable. Bookings and the user are mutable records
owned by the booking store; only the booking service changes them.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterable, Self

from bookings.domain.errors import BookingAlreadyResolvedError, ErrorCode
from bookings.domain.value_objects import Amenity, BookingId, Capacity, RoomId, SlotId


@dataclass(frozen=True)
class Room:
    """Domain representation of a bookable room."""

    id: RoomId
    name: str
    building: str
    floor: int
    capacity: Capacity
    amenities: frozenset[Amenity]
    qr_code_id: str
    image_ref: str | None = None

    @property
    def location(self) -> str:
        return f"{self.building}, Floor {self.floor}"

    def offers(self, amenities: Iterable[Amenity]) -> bool:
        """Return True if the room has every requested amenity."""
        return set(amenities) <= self.amenities

    def matches(self, search_text: str) -> bool:
        """Case-insensitive substring match on name or building."""
        needle = search_text.strip().casefold()
        if not needle:
            return True
        return needle in self.name.casefold() or needle in self.building.casefold()


@dataclass(frozen=True)
class TimeSlot:
    """A one-hour interval of a room's day, computed on demand."""

    id: SlotId
    start_time: datetime
    end_time: datetime
    is_available: bool

    def is_consecutive_with(self, other: "TimeSlot") -> bool:
        return self.end_time == other.start_time

    @property
    def duration(self) -> timedelta:
        return self.end_time - self.start_time


class BookingStatus(Enum):
    """Externally visible booking status, derived from flags and the current time."""

    CANCELLED = "cancelled"
    CHECKED_IN = "checked_in"
    MISSED = "missed"
    CHECK_IN_ELIGIBLE = "check_in_eligible"
    EXPIRED = "expired"
    UPCOMING = "upcoming"


@dataclass
class Booking:
    """A reservation of one slot.

    At most one of checked_in, missed_check_in and cancelled ever becomes
    True. Once one of them is set the booking is resolved and never changes.
    """

    id: BookingId
    room_id: RoomId
    room_name: str
    date: date
    start_time: datetime
    end_time: datetime
    checked_in: bool = False
    checked_in_time: datetime | None = None
    missed_check_in: bool = False
    cancelled: bool = False

    @property
    def is_resolved(self) -> bool:
        return self.checked_in or self.missed_check_in or self.cancelled

    def mark_checked_in(self, at: datetime) -> None:
        self._ensure_unresolved()
        self.checked_in = True
        self.checked_in_time = at

    def mark_missed(self) -> None:
        self._ensure_unresolved()
        self.missed_check_in = True

    def mark_cancelled(self) -> None:
        self._ensure_unresolved()
        self.cancelled = True

    def _ensure_unresolved(self) -> None:
        if self.is_resolved:
            raise BookingAlreadyResolvedError(str(self.id))


@dataclass
class User:
    """The single user of the system and their strike count."""

    id: str
    name: str
    email: str
    strikes: int = 0
    last_strike_reduction: datetime | None = None

    def __post_init__(self) -> None:
        if self.strikes < 0:
            raise ValueError("Strikes cannot be negative")


@dataclass(frozen=True)
class BookingView:
    """Read-only projection of a booking annotated with its derived status."""

    id: BookingId
    room_id: RoomId
    room_name: str
    date: date
    start_time: datetime
    end_time: datetime
    checked_in: bool
    checked_in_time: datetime | None
    missed_check_in: bool
    cancelled: bool
    status: BookingStatus

    @classmethod
    def of(cls, booking: Booking, status: BookingStatus) -> Self:
        return cls(
            id=booking.id,
            room_id=booking.room_id,
            room_name=booking.room_name,
            date=booking.date,
            start_time=booking.start_time,
            end_time=booking.end_time,
            checked_in=booking.checked_in,
            checked_in_time=booking.checked_in_time,
            missed_check_in=booking.missed_check_in,
            cancelled=booking.cancelled,
            status=status,
        )


@dataclass(frozen=True)
class UserProfile:
    """Read-only projection of the user, including booking permission."""

    id: str
    name: str
    email: str
    strikes: int
    max_strikes: int
    last_strike_reduction: datetime | None
    can_book_room: bool


@dataclass(frozen=True)
class CancellationOutcome:
    """Result of a cancel request.

    reason is set only when success is False.
    """

    success: bool
    penalty_applied: bool
    reason: ErrorCode | None = None

    @classmethod
    def cancelled(cls, penalty_applied: bool) -> Self:
        return cls(success=True, penalty_applied=penalty_applied)

    @classmethod
    def rejected(cls, reason: ErrorCode) -> Self:
        return cls(success=False, penalty_applied=False, reason=reason)
