"""Booking service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

BookingService is the aggregate root over the room catalog, the bookings
and the user's strike ledger. Every operation that reads and then writes
the store runs under one lock per service instance.
"""

import logging
import threading
from datetime import date, datetime, timedelta
from typing import Callable, Iterable

from bookings.domain import (
    Amenity,
    Booking,
    BookingId,
    BookingPolicy,
    BookingView,
    CancellationOutcome,
    Room,
    RoomId,
    SlotId,
    TimeSlot,
    UserProfile,
)
from bookings.domain.availability import build_day_slots
from bookings.domain.errors import (
    BookingAlreadyResolvedError,
    BookingAlreadyStartedError,
    BookingNotFoundError,
    DomainError,
    InvalidBookingIdError,
    InvalidSlotIdError,
    NoEligibleBookingError,
    OutsideBookingHorizonError,
    OutsideCheckInWindowError,
    RoomNotFoundError,
    SlotNotFoundError,
    SlotUnavailableError,
    StrikeLimitReachedError,
)
from bookings.domain.policies import derive_status
from bookings.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for room booking, check-in, cancellation and strikes.

    Operations take the current instant as an explicit as_of argument.
    now() is the only clock read and exists for callers at the edge.
    """

    def __init__(
        self,
        store: BookingStore,
        policy: BookingPolicy | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = store
        self._policy = policy or BookingPolicy()
        self._policy.strikes.ensure_within_ceiling(store.get_user())
        self._clock = clock
        self._lock = threading.RLock()

    @property
    def policy(self) -> BookingPolicy:
        return self._policy

    def now(self) -> datetime:
        return self._clock()

    def list_rooms(
        self,
        search: str | None = None,
        amenities: Iterable[Amenity] = (),
    ) -> list[Room]:
        """Return rooms matching the search text and offering all amenities."""
        wanted = frozenset(amenities)
        return [
            room
            for room in self._store.list_rooms()
            if (not search or room.matches(search)) and room.offers(wanted)
        ]

    def get_room(self, room_id: str) -> Room:
        """Return a room by ID.

        Raises:
            RoomNotFoundError: If the room does not exist.
        """
        return self._require_room(room_id)

    def get_available_slots(self, room_id: str, day: date) -> list[TimeSlot]:
        """Return the day's slots for a room, recomputed from current bookings.

        Raises:
            RoomNotFoundError: If the room does not exist.
        """
        with self._lock:
            room = self._require_room(room_id)
            return build_day_slots(day, room.id, self._store.list_bookings(), self._policy.hours)

    def add_booking(self, room_id: str, day: date, slot_id: str, as_of: datetime) -> Booking:
        """Book one slot.

        Raises:
            RoomNotFoundError: If the room does not exist.
            StrikeLimitReachedError: If the user has too many strikes.
            OutsideBookingHorizonError: If day is in the past or too far ahead.
            InvalidSlotIdError: If slot_id is malformed.
            SlotNotFoundError: If slot_id is not one of the day's slots.
            SlotUnavailableError: If the slot is already booked.
        """
        return self.add_bookings(room_id, day, [slot_id], as_of)[0]

    def add_bookings(
        self,
        room_id: str,
        day: date,
        slot_ids: Iterable[str],
        as_of: datetime,
    ) -> list[Booking]:
        """Book several slots of one room and day, one booking per slot.

        The strike threshold is checked before the request itself, then every
        slot is validated before any booking is created. Raises the same
        errors as add_booking.
        """
        with self._lock:
            room = self._require_room(room_id)
            user = self._store.get_user()
            ledger = self._policy.strikes
            if not ledger.can_book_room(user):
                logger.warning(
                    "Booking of room %s refused, user %s has %d strikes",
                    room.id,
                    user.id,
                    user.strikes,
                )
                raise StrikeLimitReachedError(user.strikes, ledger.booking_threshold)

            requested = self._parse_slot_ids(slot_ids)
            if not requested:
                raise ValueError("At least one time slot must be selected")
            self._ensure_within_horizon(day, as_of)

            day_slots = {
                slot.id: slot
                for slot in build_day_slots(
                    day, room.id, self._store.list_bookings(), self._policy.hours
                )
            }
            chosen: list[TimeSlot] = []
            for slot_id in requested:
                slot = day_slots.get(slot_id)
                if slot is None:
                    raise SlotNotFoundError(str(slot_id))
                if not slot.is_available:
                    raise SlotUnavailableError(str(slot_id))
                chosen.append(slot)

            created: list[Booking] = []
            for slot in chosen:
                booking = Booking(
                    id=BookingId.new(),
                    room_id=room.id,
                    room_name=room.name,
                    date=day,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                )
                self._store.add_booking(booking)
                created.append(booking)
                logger.info(
                    "Booking %s created for room %s at %s",
                    booking.id,
                    room.id,
                    booking.start_time.isoformat(timespec="minutes"),
                )
            return created

    def check_in(self, booking_id: str, as_of: datetime) -> bool:
        """Confirm occupancy. Returns False if the booking cannot be checked in."""
        try:
            self._check_in(booking_id, as_of)
        except DomainError as exc:
            logger.debug("Check-in of booking %s rejected: %s", booking_id, exc.code.value)
            return False
        return True

    def check_in_by_room_token(self, qr_code_id: str, as_of: datetime) -> Booking:
        """Check in the earliest eligible booking of the room behind a QR token.

        Raises:
            RoomNotFoundError: If no room carries the token.
            NoEligibleBookingError: If no booking of that room is in its window.
        """
        with self._lock:
            room = self._store.get_room_by_qr_code(qr_code_id)
            if room is None:
                raise RoomNotFoundError(qr_code_id)
            window = self._policy.check_in
            eligible = sorted(
                (
                    booking
                    for booking in self._store.list_bookings()
                    if booking.room_id == room.id and window.is_eligible(booking, as_of)
                ),
                key=lambda booking: booking.start_time,
            )
            if not eligible:
                raise NoEligibleBookingError(str(room.id))
            return self._check_in(str(eligible[0].id), as_of)

    def cancel(self, booking_id: str, as_of: datetime) -> CancellationOutcome:
        """Cancel a booking that has not started yet.

        A strike is applied when the booking starts within the penalty-free
        notice period.
        """
        try:
            penalty_applied = self._cancel(booking_id, as_of)
        except DomainError as exc:
            logger.debug("Cancellation of booking %s rejected: %s", booking_id, exc.code.value)
            return CancellationOutcome.rejected(exc.code)
        return CancellationOutcome.cancelled(penalty_applied)

    def reconcile_missed_check_ins(self, as_of: datetime) -> int:
        """Flag every booking whose check-in grace period has elapsed.

        Each newly flagged booking costs one strike. A booking that is already
        flagged is skipped, so repeated calls never charge twice.
        """
        window = self._policy.check_in
        ledger = self._policy.strikes
        with self._lock:
            user = self._store.get_user()
            flagged = 0
            for booking in self._store.list_bookings():
                if booking.is_resolved or not window.is_missed(booking, as_of):
                    continue
                booking.mark_missed()
                self._store.save_booking(booking)
                ledger.add_strike(user)
                flagged += 1
                logger.info("Booking %s flagged as missed check-in", booking.id)
            if flagged:
                self._store.save_user(user)
                logger.info("Reconciliation flagged %d missed check-ins", flagged)
            return flagged

    def get_user(self) -> UserProfile:
        with self._lock:
            user = self._store.get_user()
        ledger = self._policy.strikes
        return UserProfile(
            id=user.id,
            name=user.name,
            email=user.email,
            strikes=user.strikes,
            max_strikes=ledger.ceiling,
            last_strike_reduction=user.last_strike_reduction,
            can_book_room=ledger.can_book_room(user),
        )

    def list_bookings(self, as_of: datetime) -> list[BookingView]:
        """Return every booking with its status at as_of."""
        window = self._policy.check_in
        with self._lock:
            bookings = self._store.list_bookings()
        return [BookingView.of(booking, derive_status(booking, as_of, window)) for booking in bookings]

    def add_strike(self) -> bool:
        with self._lock:
            user = self._store.get_user()
            added = self._policy.strikes.add_strike(user)
            self._store.save_user(user)
            return added

    def reduce_strikes(self, as_of: datetime) -> bool:
        with self._lock:
            user = self._store.get_user()
            reduced = self._policy.strikes.reduce_strikes(user, as_of)
            self._store.save_user(user)
            return reduced

    def _check_in(self, booking_id: str, as_of: datetime) -> Booking:
        with self._lock:
            booking = self._require_booking(booking_id)
            if booking.is_resolved:
                raise BookingAlreadyResolvedError(booking_id)
            if not self._policy.check_in.is_eligible(booking, as_of):
                raise OutsideCheckInWindowError(booking_id)
            booking.mark_checked_in(as_of)
            self._store.save_booking(booking)
            logger.info("Booking %s checked in", booking.id)
            return booking

    def _cancel(self, booking_id: str, as_of: datetime) -> bool:
        cancellation = self._policy.cancellation
        with self._lock:
            booking = self._require_booking(booking_id)
            if booking.is_resolved:
                raise BookingAlreadyResolvedError(booking_id)
            if not cancellation.is_cancellable(booking, as_of):
                raise BookingAlreadyStartedError(booking_id)

            penalty_applied = cancellation.cancel_with_penalty(booking, as_of)
            booking.mark_cancelled()
            self._store.save_booking(booking)
            if penalty_applied:
                user = self._store.get_user()
                self._policy.strikes.add_strike(user)
                self._store.save_user(user)
            logger.info(
                "Booking %s cancelled %s penalty",
                booking.id,
                "with" if penalty_applied else "without",
            )
            return penalty_applied

    def _require_room(self, room_id: str) -> Room:
        try:
            room = self._store.get_room(RoomId(room_id))
        except ValueError:
            room = None
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def _require_booking(self, booking_id: str) -> Booking:
        try:
            parsed = BookingId.from_string(booking_id)
        except ValueError as exc:
            raise InvalidBookingIdError() from exc
        booking = self._store.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    @staticmethod
    def _parse_slot_ids(slot_ids: Iterable[str]) -> list[SlotId]:
        parsed: list[SlotId] = []
        for raw in slot_ids:
            try:
                slot_id = SlotId.from_string(raw)
            except ValueError as exc:
                raise InvalidSlotIdError() from exc
            if slot_id not in parsed:
                parsed.append(slot_id)
        return parsed

    def _ensure_within_horizon(self, day: date, as_of: datetime) -> None:
        horizon = self._policy.booking_horizon_days
        if horizon is None:
            return
        first_day = as_of.date()
        if not first_day <= day <= first_day + timedelta(days=horizon):
            raise OutsideBookingHorizonError(horizon)
