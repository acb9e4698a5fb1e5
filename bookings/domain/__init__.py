from bookings.domain.models import (
    Booking,
    BookingStatus,
    BookingView,
    CancellationOutcome,
    Room,
    TimeSlot,
    User,
    UserProfile,
)
from bookings.domain.policies import BookingPolicy, CancellationPolicy, CheckInWindow
from bookings.domain.strikes import StrikeLedger, StrikeReductionMode
from bookings.domain.value_objects import (
    Amenity,
    BookingId,
    Capacity,
    OperatingHours,
    RoomId,
    SlotId,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "BookingView",
    "CancellationOutcome",
    "Room",
    "TimeSlot",
    "User",
    "UserProfile",
    "BookingPolicy",
    "CancellationPolicy",
    "CheckInWindow",
    "StrikeLedger",
    "StrikeReductionMode",
    "Amenity",
    "BookingId",
    "Capacity",
    "OperatingHours",
    "RoomId",
    "SlotId",
]
