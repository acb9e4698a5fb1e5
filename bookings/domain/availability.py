"""Availability calculator: the bookable slots of one room on one day."""

from datetime import date, datetime, time, timedelta
from typing import Iterable

from bookings.domain.models import Booking, TimeSlot
from bookings.domain.timeslots import overlaps_by_hour, slot_id_for
from bookings.domain.value_objects import OperatingHours, RoomId

SLOT_LENGTH = timedelta(hours=1)


def slot_is_taken(
    booking: Booking,
    room_id: RoomId,
    day: date,
    slot_start: datetime,
    slot_end: datetime,
) -> bool:
    """Return True if a live booking of the same room occupies the slot."""
    return (
        not booking.cancelled
        and booking.room_id == room_id
        and booking.date == day
        and booking.start_time.date() == day
        and overlaps_by_hour(booking.start_time, booking.end_time, slot_start, slot_end)
    )


def build_day_slots(
    day: date,
    room_id: RoomId,
    bookings: Iterable[Booking],
    hours: OperatingHours,
) -> list[TimeSlot]:
    """Return one slot per operating hour of day, in start-time order.

    The result is a pure projection of the given bookings; cancelled
    bookings never block a slot.
    """
    candidates = [
        booking
        for booking in bookings
        if booking.room_id == room_id and not booking.cancelled
    ]
    day_start = datetime.combine(day, time.min)

    slots: list[TimeSlot] = []
    for hour in range(hours.opening_hour, hours.closing_hour):
        start_time = day_start + timedelta(hours=hour)
        end_time = start_time + SLOT_LENGTH
        taken = any(
            slot_is_taken(booking, room_id, day, start_time, end_time)
            for booking in candidates
        )
        slots.append(
            TimeSlot(
                id=slot_id_for(start_time),
                start_time=start_time,
                end_time=end_time,
                is_available=not taken,
            )
        )
    return slots
