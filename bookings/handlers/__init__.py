from bookings.handlers.views import (
    BookingCancelView,
    BookingCheckInView,
    BookingListView,
    ReconcileMissedCheckInsView,
    RoomCheckInView,
    RoomDetailView,
    RoomListView,
    RoomSlotListView,
    StrikeReductionView,
    UserProfileView,
)

__all__ = [
    "BookingCancelView",
    "BookingCheckInView",
    "BookingListView",
    "ReconcileMissedCheckInsView",
    "RoomCheckInView",
    "RoomDetailView",
    "RoomListView",
    "RoomSlotListView",
    "StrikeReductionView",
    "UserProfileView",
]
