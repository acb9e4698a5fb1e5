"""Unit tests for the availability calculator.

Run with: pytest tests/test_availability.py -v
"""

from datetime import date, datetime, timedelta

import pytest

from bookings.domain import OperatingHours, RoomId
from bookings.domain.availability import build_day_slots
from bookings.domain.timeslots import slot_id_for

DAY = date(2025, 3, 20)
ROOM = RoomId("1")


def slot_at(slots, hour):
    return next(slot for slot in slots if slot.start_time.hour == hour)


class TestDaySlots:
    """Tests for the shape of a day's slots."""

    @pytest.mark.parametrize(
        "day",
        [date(2025, 3, 20), date(2024, 2, 29), date(2025, 3, 9), date(2025, 11, 2), date(2025, 12, 31)],
    )
    def test_fourteen_hourly_slots_in_order(self, day):
        """Every day has 14 one-hour slots from 08:00 to 22:00."""
        slots = build_day_slots(day, ROOM, [], OperatingHours())

        assert len(slots) == 14
        assert slots[0].start_time == datetime.combine(day, datetime.min.time()).replace(hour=8)
        assert slots[-1].end_time == datetime.combine(day, datetime.min.time()).replace(hour=22)
        for earlier, later in zip(slots, slots[1:]):
            assert earlier.start_time < later.start_time
            assert earlier.is_consecutive_with(later)
        assert all(slot.duration == timedelta(hours=1) for slot in slots)
        assert all(slot.is_available for slot in slots)

    def test_slot_ids_follow_start_times(self):
        """Each slot's id is derived from its start time."""
        for slot in build_day_slots(DAY, ROOM, [], OperatingHours()):
            assert slot.id == slot_id_for(slot.start_time)

    def test_custom_operating_hours(self):
        """The slot count follows the configured hours."""
        slots = build_day_slots(DAY, ROOM, [], OperatingHours(opening_hour=10, closing_hour=13))
        assert [slot.start_time.hour for slot in slots] == [10, 11, 12]


class TestConflicts:
    """Tests for marking slots taken by existing bookings."""

    def test_booking_blocks_only_its_hour(self, make_booking):
        """A 9-10 booking blocks the 9:00 slot and leaves 10:00 free."""
        booking = make_booking(datetime(2025, 3, 20, 9))
        slots = build_day_slots(DAY, ROOM, [booking], OperatingHours())

        assert not slot_at(slots, 9).is_available
        assert slot_at(slots, 8).is_available
        assert slot_at(slots, 10).is_available
        assert sum(not slot.is_available for slot in slots) == 1

    def test_multi_hour_booking_blocks_each_hour(self, make_booking):
        """A two-hour booking blocks both of its slots."""
        booking = make_booking(datetime(2025, 3, 20, 14), hours=2)
        slots = build_day_slots(DAY, ROOM, [booking], OperatingHours())

        assert [slot.start_time.hour for slot in slots if not slot.is_available] == [14, 15]

    def test_cancelled_booking_frees_slot(self, make_booking):
        """Cancelled bookings never block a slot."""
        booking = make_booking(datetime(2025, 3, 20, 9), cancelled=True)
        slots = build_day_slots(DAY, ROOM, [booking], OperatingHours())

        assert slot_at(slots, 9).is_available

    @pytest.mark.parametrize("flag", ["checked_in", "missed_check_in"])
    def test_resolved_but_not_cancelled_still_blocks(self, make_booking, flag):
        """Checked-in and missed bookings keep their slot."""
        booking = make_booking(datetime(2025, 3, 20, 9), **{flag: True})
        slots = build_day_slots(DAY, ROOM, [booking], OperatingHours())

        assert not slot_at(slots, 9).is_available

    def test_other_room_does_not_block(self, make_booking):
        """Bookings of another room are ignored."""
        booking = make_booking(datetime(2025, 3, 20, 9), room_id="2")
        slots = build_day_slots(DAY, ROOM, [booking], OperatingHours())

        assert all(slot.is_available for slot in slots)

    def test_other_day_does_not_block(self, make_booking):
        """Bookings on another day are ignored."""
        booking = make_booking(datetime(2025, 3, 21, 9))
        slots = build_day_slots(DAY, ROOM, [booking], OperatingHours())

        assert all(slot.is_available for slot in slots)

    def test_recomputed_after_each_change(self, make_booking):
        """Availability reflects the booking set passed on every call."""
        booking = make_booking(datetime(2025, 3, 20, 9))
        assert not slot_at(build_day_slots(DAY, ROOM, [booking], OperatingHours()), 9).is_available

        booking.mark_cancelled()
        assert slot_at(build_day_slots(DAY, ROOM, [booking], OperatingHours()), 9).is_available
