"""Time-relative booking rules.

Every predicate takes the current instant as an argument and never reads the
clock itself, so a single operation sees one consistent now.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from bookings.domain.models import Booking, BookingStatus
from bookings.domain.strikes import StrikeLedger
from bookings.domain.value_objects import OperatingHours


@dataclass(frozen=True)
class CheckInWindow:
    """Check-in opens shortly before a booking starts and closes when it ends.

    A booking not checked in by start_time + grace_period is a missed check-in.
    """

    opens_before: timedelta = timedelta(minutes=10)
    grace_period: timedelta = timedelta(minutes=10)

    def is_eligible(self, booking: Booking, now: datetime) -> bool:
        if booking.cancelled or booking.missed_check_in or booking.checked_in:
            return False
        return booking.start_time - self.opens_before <= now < booking.end_time

    def is_missed(self, booking: Booking, now: datetime) -> bool:
        if booking.is_resolved:
            return booking.missed_check_in
        return now > booking.start_time + self.grace_period


@dataclass(frozen=True)
class CancellationPolicy:
    """Cancelling early is free; cancelling close to the start costs a strike."""

    penalty_free_notice: timedelta = timedelta(hours=3)

    def is_cancellable(self, booking: Booking, now: datetime) -> bool:
        return not booking.is_resolved and now < booking.start_time

    def cancel_without_penalty(self, booking: Booking, now: datetime) -> bool:
        return (
            self.is_cancellable(booking, now)
            and booking.start_time - now >= self.penalty_free_notice
        )

    def cancel_with_penalty(self, booking: Booking, now: datetime) -> bool:
        return (
            self.is_cancellable(booking, now)
            and booking.start_time - now < self.penalty_free_notice
        )


def derive_status(booking: Booking, now: datetime, window: CheckInWindow) -> BookingStatus:
    """Project a booking's flags and now onto its visible status.

    Persisted terminal flags win over the time-relative states.
    """
    if booking.cancelled:
        return BookingStatus.CANCELLED
    if booking.checked_in:
        return BookingStatus.CHECKED_IN
    if booking.missed_check_in:
        return BookingStatus.MISSED
    if window.is_eligible(booking, now):
        return BookingStatus.CHECK_IN_ELIGIBLE
    if now > booking.end_time:
        return BookingStatus.EXPIRED
    return BookingStatus.UPCOMING


@dataclass(frozen=True)
class BookingPolicy:
    """All tunable rules of the booking engine in one value."""

    hours: OperatingHours = field(default_factory=OperatingHours)
    check_in: CheckInWindow = field(default_factory=CheckInWindow)
    cancellation: CancellationPolicy = field(default_factory=CancellationPolicy)
    strikes: StrikeLedger = field(default_factory=StrikeLedger)
    booking_horizon_days: int | None = 28

    def __post_init__(self) -> None:
        if self.booking_horizon_days is not None and self.booking_horizon_days < 0:
            raise ValueError("Booking horizon cannot be negative")
