"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta

import pytest
from rest_framework.test import APIClient

from bookings.domain import Booking, BookingId, BookingPolicy, RoomId
from bookings.domain.timeslots import slot_id_for
from bookings.services import BookingService
from bookings.stores import DEFAULT_ROOMS, DEFAULT_USER, InMemoryBookingStore

AS_OF = datetime(2025, 3, 20, 9, 0)


class FixedClock:
    """Stand-in for datetime.now that tests move by setting current."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def __call__(self) -> datetime:
        return self.current


def _make_booking(start: datetime, hours: int = 1, room_id: str = "1", **flags) -> Booking:
    return Booking(
        id=BookingId.new(),
        room_id=RoomId(room_id),
        room_name="Study Room 101",
        date=start.date(),
        start_time=start,
        end_time=start + timedelta(hours=hours),
        **flags,
    )


@pytest.fixture
def make_booking():
    return _make_booking


@pytest.fixture
def as_of() -> datetime:
    return AS_OF


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(AS_OF)


@pytest.fixture
def store() -> InMemoryBookingStore:
    return InMemoryBookingStore(rooms=DEFAULT_ROOMS, user=DEFAULT_USER)


@pytest.fixture
def service(store: InMemoryBookingStore, clock: FixedClock) -> BookingService:
    return BookingService(store, policy=BookingPolicy(), clock=clock)


@pytest.fixture
def book(service: BookingService):
    """Book the slot starting at start, booked at booked_at."""

    def _book(start: datetime, booked_at: datetime = AS_OF, room_id: str = "1") -> Booking:
        return service.add_booking(room_id, start.date(), str(slot_id_for(start)), booked_at)

    return _book


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def app_service(service: BookingService, monkeypatch) -> BookingService:
    """Route API requests to the test's isolated service."""
    from django.apps import apps

    monkeypatch.setattr(apps.get_app_config("bookings"), "service", service)
    return service
