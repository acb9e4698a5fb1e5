"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Returned bookings and
users are copies: changes only take effect through save_booking/save_user.
"""

from abc import ABC, abstractmethod

from bookings.domain import Booking, BookingId, Room, RoomId, User


class BookingStore(ABC):
    """Interface for rooms, bookings and the user record."""

    @abstractmethod
    def list_rooms(self) -> list[Room]:
        """Return all rooms in catalog order."""
        ...

    @abstractmethod
    def get_room(self, room_id: RoomId) -> Room | None:
        """Return a room by ID, or None if not found."""
        ...

    @abstractmethod
    def get_room_by_qr_code(self, qr_code_id: str) -> Room | None:
        """Return the room whose QR token matches, or None."""
        ...

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """Return all bookings, cancelled ones included, in creation order."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def add_booking(self, booking: Booking) -> None:
        """Persist a new booking."""
        ...

    @abstractmethod
    def save_booking(self, booking: Booking) -> None:
        """Persist changes to an existing booking."""
        ...

    @abstractmethod
    def get_user(self) -> User:
        """Return the user record."""
        ...

    @abstractmethod
    def save_user(self, user: User) -> None:
        """Persist changes to the user record."""
        ...
