from bookings.services.booking_service import BookingService

__all__ = ["BookingService"]
