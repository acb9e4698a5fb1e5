"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from datetime import datetime

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.conf import client_as_of_allowed
from bookings.domain.errors import DomainError, ErrorCode
from bookings.handlers.serializers import (
    AsOfSerializer,
    BookingSerializer,
    BookingStatusSerializer,
    CancellationOutcomeSerializer,
    CreateBookingSerializer,
    RoomCheckInSerializer,
    RoomFilterSerializer,
    RoomSerializer,
    SlotQuerySerializer,
    TimeSlotSerializer,
    UserProfileSerializer,
)
from bookings.services import BookingService

_NOT_FOUND_CODES = {
    ErrorCode.ROOM_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND,
    ErrorCode.SLOT_NOT_FOUND,
}
_BAD_REQUEST_CODES = {
    ErrorCode.INVALID_BOOKING_ID,
    ErrorCode.INVALID_SLOT_ID,
}


def status_for(code: ErrorCode) -> int:
    if code in _NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if code in _BAD_REQUEST_CODES:
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_409_CONFLICT


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status_for(error.code),
    )


class BookingAPIView(APIView):
    """Base handler resolving the BookingService.

    Pass service to as_view() to inject one; otherwise the app's service is used.
    """

    service: BookingService | None = None

    def get_service(self) -> BookingService:
        if self.service is not None:
            return self.service
        return apps.get_app_config("bookings").service

    def get_as_of(self, request: Request) -> datetime:
        """Evaluation instant for a read-only request.

        A client as_of query parameter is honoured only when
        ROOM_BOOKING["ALLOW_CLIENT_AS_OF"] is set; otherwise the server clock wins.
        """
        if client_as_of_allowed():
            serializer = AsOfSerializer(data=request.query_params)
            serializer.is_valid(raise_exception=True)
            as_of = serializer.validated_data.get("as_of")
            if as_of is not None:
                return as_of
        return self.get_service().now()


class RoomListView(BookingAPIView):
    """Handler for GET /api/rooms"""

    def get(self, request: Request) -> Response:
        filters = RoomFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        rooms = self.get_service().list_rooms(
            search=filters.validated_data.get("search"),
            amenities=filters.validated_data.get("amenities", ()),
        )
        return Response(RoomSerializer(rooms, many=True).data)


class RoomDetailView(BookingAPIView):
    """Handler for GET /api/rooms/{room_id}"""

    def get(self, request: Request, room_id: str) -> Response:
        try:
            room = self.get_service().get_room(room_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(RoomSerializer(room).data)


class RoomSlotListView(BookingAPIView):
    """Handler for GET /api/rooms/{room_id}/slots?date=YYYY-MM-DD"""

    def get(self, request: Request, room_id: str) -> Response:
        query = SlotQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            slots = self.get_service().get_available_slots(room_id, query.validated_data["date"])
        except DomainError as exc:
            return error_response(exc)
        return Response(TimeSlotSerializer(slots, many=True).data)


class BookingListView(BookingAPIView):
    """Handler for GET and POST /api/bookings"""

    def get(self, request: Request) -> Response:
        as_of = self.get_as_of(request)
        bookings = self.get_service().list_bookings(as_of)
        return Response(BookingStatusSerializer(bookings, many=True).data)

    def post(self, request: Request) -> Response:
        payload = CreateBookingSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data
        service = self.get_service()
        try:
            bookings = service.add_bookings(
                data["room_id"],
                data["date"],
                data["slot_ids"],
                service.now(),
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(bookings, many=True).data, status=status.HTTP_201_CREATED)


class BookingCheckInView(BookingAPIView):
    """Handler for POST /api/bookings/{booking_id}/check-in"""

    def post(self, request: Request, booking_id: str) -> Response:
        service = self.get_service()
        checked_in = service.check_in(booking_id, service.now())
        if not checked_in:
            return Response({"checked_in": False}, status=status.HTTP_409_CONFLICT)
        return Response({"checked_in": True})


class BookingCancelView(BookingAPIView):
    """Handler for POST /api/bookings/{booking_id}/cancel"""

    def post(self, request: Request, booking_id: str) -> Response:
        service = self.get_service()
        outcome = service.cancel(booking_id, service.now())
        http_status = status.HTTP_200_OK if outcome.success else status_for(outcome.reason)
        return Response(CancellationOutcomeSerializer(outcome).data, status=http_status)


class ReconcileMissedCheckInsView(BookingAPIView):
    """Handler for POST /api/bookings/reconcile"""

    def post(self, request: Request) -> Response:
        service = self.get_service()
        flagged = service.reconcile_missed_check_ins(service.now())
        return Response({"flagged": flagged})


class RoomCheckInView(BookingAPIView):
    """Handler for POST /api/check-ins (QR scan of a room token)"""

    def post(self, request: Request) -> Response:
        payload = RoomCheckInSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        service = self.get_service()
        try:
            booking = service.check_in_by_room_token(
                payload.validated_data["qr_code_id"], service.now()
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)


class UserProfileView(BookingAPIView):
    """Handler for GET /api/user"""

    def get(self, request: Request) -> Response:
        return Response(UserProfileSerializer(self.get_service().get_user()).data)


class StrikeReductionView(BookingAPIView):
    """Handler for POST /api/user/strike-reductions"""

    def post(self, request: Request) -> Response:
        service = self.get_service()
        reduced = service.reduce_strikes(service.now())
        body = {"reduced": reduced, "user": UserProfileSerializer(service.get_user()).data}
        return Response(body)
