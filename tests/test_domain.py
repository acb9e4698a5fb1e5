"""Unit tests for domain primitives and entities.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta
from uuid import UUID

import pytest

from bookings.domain import (
    Amenity,
    BookingId,
    Capacity,
    OperatingHours,
    RoomId,
    SlotId,
    TimeSlot,
    User,
)
from bookings.domain.errors import BookingAlreadyResolvedError, ErrorCode
from bookings.domain.timeslots import overlaps_by_hour, slot_id_for, truncate_to_hour
from bookings.stores import DEFAULT_ROOMS


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(4).value == 4

    def test_capacity_rejects_zero(self):
        """A room must seat at least one person."""
        with pytest.raises(ValueError):
            Capacity(0)

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-2)


class TestOperatingHours:
    """Tests for OperatingHours value object."""

    def test_default_hours_give_fourteen_slots(self):
        """08:00-22:00 holds fourteen one-hour slots."""
        assert OperatingHours().slot_count == 14

    @pytest.mark.parametrize("opening, closing", [(10, 10), (12, 8), (-1, 8), (8, 25)])
    def test_rejects_invalid_window(self, opening, closing):
        """Opening must come before closing within one day."""
        with pytest.raises(ValueError):
            OperatingHours(opening_hour=opening, closing_hour=closing)


class TestIdentifiers:
    """Tests for id value objects."""

    def test_booking_id_from_string_valid_uuid(self):
        """BookingId.from_string parses valid UUID."""
        raw = "5f1c1f0e-8b7a-4a39-9a55-2f6f3c0d8e11"
        assert BookingId.from_string(raw).value == UUID(raw)

    def test_booking_id_from_string_invalid_uuid(self):
        """BookingId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            BookingId.from_string("not-a-uuid")

    def test_new_booking_ids_are_unique(self):
        """Generated booking ids are never reused."""
        assert len({BookingId.new() for _ in range(50)}) == 50

    def test_room_id_rejects_blank(self):
        """RoomId cannot be empty."""
        with pytest.raises(ValueError):
            RoomId("  ")


class TestSlotIdentity:
    """Tests for deterministic slot ids."""

    def test_same_start_time_gives_same_id(self):
        """Computing the id twice for one start time yields the same id."""
        start = datetime(2025, 3, 20, 14, 0)
        assert slot_id_for(start) == slot_id_for(datetime(2025, 3, 20, 14, 0))

    def test_seconds_do_not_change_the_id(self):
        """Ids are keyed on the minute."""
        start = datetime(2025, 3, 20, 14, 0)
        assert slot_id_for(start) == slot_id_for(start.replace(second=42, microsecond=7))

    def test_different_minutes_give_different_ids(self):
        """Each start minute of a day maps to its own id."""
        day_start = datetime(2025, 3, 20)
        ids = {slot_id_for(day_start + timedelta(minutes=m)) for m in range(24 * 60)}
        assert len(ids) == 24 * 60

    def test_same_time_on_different_days_differs(self):
        """The date is part of the id."""
        assert slot_id_for(datetime(2025, 3, 20, 9)) != slot_id_for(datetime(2025, 3, 21, 9))

    def test_id_parses_back_from_its_string(self):
        """Callers can send the id back as text."""
        slot_id = slot_id_for(datetime(2025, 3, 20, 9))
        assert SlotId.from_string(str(slot_id)) == slot_id


class TestOverlapsByHour:
    """Tests for hour-granularity interval comparison."""

    def test_same_hour_conflicts(self):
        """A 9-10 interval conflicts with the 9-10 slot."""
        nine, ten = datetime(2025, 3, 20, 9), datetime(2025, 3, 20, 10)
        assert overlaps_by_hour(nine, ten, nine, ten)

    def test_adjacent_hours_do_not_conflict(self):
        """A 9-10 interval does not conflict with the 10-11 slot."""
        nine, ten, eleven = (datetime(2025, 3, 20, h) for h in (9, 10, 11))
        assert not overlaps_by_hour(nine, ten, ten, eleven)
        assert not overlaps_by_hour(ten, eleven, nine, ten)

    def test_minutes_are_ignored(self):
        """9:30-10:30 compares as 9-10, so it misses the 10-11 slot."""
        ten, eleven = datetime(2025, 3, 20, 10), datetime(2025, 3, 20, 11)
        assert not overlaps_by_hour(datetime(2025, 3, 20, 9, 30), datetime(2025, 3, 20, 10, 30), ten, eleven)

    def test_truncate_to_hour(self):
        """Minutes, seconds and microseconds are dropped."""
        assert truncate_to_hour(datetime(2025, 3, 20, 9, 59, 59, 9)) == datetime(2025, 3, 20, 9)


class TestRoom:
    """Tests for Room domain model."""

    def test_location_combines_building_and_floor(self):
        """Location reads as building and floor."""
        assert DEFAULT_ROOMS[0].location == "Main Library, Floor 1"

    def test_search_matches_building_case_insensitively(self):
        """Search text matches the building name."""
        assert DEFAULT_ROOMS[0].matches("main LIBRARY")
        assert not DEFAULT_ROOMS[1].matches("library")

    def test_offers_requires_every_amenity(self):
        """A room must provide all requested amenities."""
        room = DEFAULT_ROOMS[0]
        assert room.offers([Amenity.WHITEBOARD])
        assert not room.offers([Amenity.WHITEBOARD, Amenity.PROJECTOR])
        assert room.offers([])

    def test_amenity_labels(self):
        """Chargers are shown as power outlets."""
        assert Amenity.CHARGER.label == "Power Outlets"


class TestTimeSlot:
    """Tests for TimeSlot domain model."""

    def test_consecutive_slots(self):
        """A slot ending when the next starts is consecutive with it."""
        nine, ten, eleven = (datetime(2025, 3, 20, h) for h in (9, 10, 11))
        first = TimeSlot(slot_id_for(nine), nine, ten, True)
        second = TimeSlot(slot_id_for(ten), ten, eleven, True)
        assert first.is_consecutive_with(second)
        assert not second.is_consecutive_with(first)
        assert first.duration == timedelta(hours=1)


class TestBooking:
    """Tests for Booking terminal-flag invariant."""

    def test_check_in_records_time(self, make_booking):
        """Checking in sets the flag and timestamp."""
        booking = make_booking(datetime(2025, 3, 20, 9))
        booking.mark_checked_in(datetime(2025, 3, 20, 8, 55))
        assert booking.checked_in
        assert booking.checked_in_time == datetime(2025, 3, 20, 8, 55)
        assert booking.is_resolved

    @pytest.mark.parametrize("flag", ["checked_in", "missed_check_in", "cancelled"])
    def test_resolved_booking_cannot_change(self, make_booking, flag):
        """Once resolved no other flag can be set."""
        booking = make_booking(datetime(2025, 3, 20, 9), **{flag: True})
        for transition in (
            lambda: booking.mark_checked_in(datetime(2025, 3, 20, 9)),
            booking.mark_missed,
            booking.mark_cancelled,
        ):
            with pytest.raises(BookingAlreadyResolvedError) as exc_info:
                transition()
            assert exc_info.value.code is ErrorCode.BOOKING_ALREADY_RESOLVED
        assert sum([booking.checked_in, booking.missed_check_in, booking.cancelled]) == 1


class TestUser:
    """Tests for User domain model."""

    def test_rejects_negative_strikes(self):
        """Strikes never go below zero."""
        with pytest.raises(ValueError):
            User(id="u", name="U", email="u@example.edu", strikes=-1)
