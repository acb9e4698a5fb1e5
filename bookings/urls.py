from django.urls import path

from bookings.handlers import (
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

urlpatterns = [
    path("rooms", RoomListView.as_view(), name="room-list"),
    path("rooms/<str:room_id>", RoomDetailView.as_view(), name="room-detail"),
    path("rooms/<str:room_id>/slots", RoomSlotListView.as_view(), name="room-slots"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/reconcile", ReconcileMissedCheckInsView.as_view(), name="booking-reconcile"),
    path(
        "bookings/<str:booking_id>/check-in",
        BookingCheckInView.as_view(),
        name="booking-check-in",
    ),
    path(
        "bookings/<str:booking_id>/cancel",
        BookingCancelView.as_view(),
        name="booking-cancel",
    ),
    path("check-ins", RoomCheckInView.as_view(), name="room-check-in"),
    path("user", UserProfileView.as_view(), name="user-profile"),
    path(
        "user/strike-reductions",
        StrikeReductionView.as_view(),
        name="user-strike-reductions",
    ),
]
