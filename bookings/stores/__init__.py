from bookings.stores.catalog import DEFAULT_ROOMS, DEFAULT_USER
from bookings.stores.interfaces import BookingStore
from bookings.stores.memory_store import InMemoryBookingStore

__all__ = [
    "BookingStore",
    "InMemoryBookingStore",
    "DEFAULT_ROOMS",
    "DEFAULT_USER",
]
