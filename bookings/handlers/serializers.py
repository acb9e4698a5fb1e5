"""Serializers for transforming domain models to API responses and parsing input."""

from rest_framework import serializers

from bookings.domain import Amenity


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    building = serializers.CharField()
    floor = serializers.IntegerField()
    location = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    amenities = serializers.SerializerMethodField()
    qr_code_id = serializers.CharField()
    image_ref = serializers.CharField(allow_null=True)

    def get_amenities(self, room) -> list[dict[str, str]]:
        return [
            {"id": amenity.value, "label": amenity.label}
            for amenity in sorted(room.amenities, key=lambda amenity: amenity.value)
        ]


class TimeSlotSerializer(serializers.Serializer):
    """Serializer for TimeSlot domain model."""

    id = serializers.CharField(source="id.value")
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    is_available = serializers.BooleanField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking and BookingView domain models."""

    id = serializers.CharField(source="id.value")
    room_id = serializers.CharField(source="room_id.value")
    room_name = serializers.CharField()
    date = serializers.DateField()
    start_time = serializers.DateTimeField()
    end_time = serializers.DateTimeField()
    checked_in = serializers.BooleanField()
    checked_in_time = serializers.DateTimeField(allow_null=True)
    missed_check_in = serializers.BooleanField()
    cancelled = serializers.BooleanField()


class BookingStatusSerializer(BookingSerializer):
    """Serializer for BookingView, including the derived status."""

    status = serializers.CharField(source="status.value")


class UserProfileSerializer(serializers.Serializer):
    """Serializer for UserProfile projection."""

    id = serializers.CharField()
    name = serializers.CharField()
    email = serializers.EmailField()
    strikes = serializers.IntegerField()
    max_strikes = serializers.IntegerField()
    last_strike_reduction = serializers.DateTimeField(allow_null=True)
    can_book_room = serializers.BooleanField()


class CancellationOutcomeSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    penalty_applied = serializers.BooleanField()
    reason = serializers.SerializerMethodField()

    def get_reason(self, outcome) -> str | None:
        return outcome.reason.value if outcome.reason else None


class AsOfSerializer(serializers.Serializer):
    """Optional evaluation instant for read-only previews.

    Only naive local wall-clock times are accepted; offsets are rejected.
    """

    as_of = serializers.DateTimeField(
        required=False,
        input_formats=["%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M"],
    )


class RoomFilterSerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
    amenities = serializers.CharField(required=False, allow_blank=True)

    def validate_amenities(self, value: str) -> list[Amenity]:
        try:
            return [Amenity(item.strip()) for item in value.split(",") if item.strip()]
        except ValueError as exc:
            raise serializers.ValidationError("Unknown amenity") from exc


class SlotQuerySerializer(serializers.Serializer):
    date = serializers.DateField()


class CreateBookingSerializer(serializers.Serializer):
    room_id = serializers.CharField()
    date = serializers.DateField()
    slot_ids = serializers.ListField(child=serializers.CharField(), min_length=1)


class RoomCheckInSerializer(serializers.Serializer):
    qr_code_id = serializers.CharField()
