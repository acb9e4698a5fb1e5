"""Process-local implementation of the BookingStore."""

from dataclasses import replace
from typing import Iterable

from bookings.domain import Booking, BookingId, Room, RoomId, User
from bookings.domain.errors import BookingNotFoundError
from bookings.stores.interfaces import BookingStore


class InMemoryBookingStore(BookingStore):
    """Dictionary-backed store keyed by id. Each instance is fully isolated."""

    def __init__(self, rooms: Iterable[Room], user: User) -> None:
        self._rooms: dict[RoomId, Room] = {room.id: room for room in rooms}
        self._bookings: dict[BookingId, Booking] = {}
        self._user = replace(user)

    def list_rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def get_room(self, room_id: RoomId) -> Room | None:
        return self._rooms.get(room_id)

    def get_room_by_qr_code(self, qr_code_id: str) -> Room | None:
        return next(
            (room for room in self._rooms.values() if room.qr_code_id == qr_code_id),
            None,
        )

    def list_bookings(self) -> list[Booking]:
        return [replace(booking) for booking in self._bookings.values()]

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        booking = self._bookings.get(booking_id)
        return replace(booking) if booking is not None else None

    def add_booking(self, booking: Booking) -> None:
        if booking.id in self._bookings:
            raise ValueError(f"Booking {booking.id} already exists")
        self._bookings[booking.id] = replace(booking)

    def save_booking(self, booking: Booking) -> None:
        if booking.id not in self._bookings:
            raise BookingNotFoundError(str(booking.id))
        self._bookings[booking.id] = replace(booking)

    def get_user(self) -> User:
        return replace(self._user)

    def save_user(self, user: User) -> None:
        self._user = replace(user)
