"""Build the booking policy and service from Django settings.

settings.ROOM_BOOKING may override any key of DEFAULTS.
"""

from datetime import timedelta
from typing import Any, Mapping

from django.conf import settings

from bookings.domain import (
    BookingPolicy,
    CancellationPolicy,
    CheckInWindow,
    OperatingHours,
    StrikeLedger,
    StrikeReductionMode,
    User,
)
from bookings.services import BookingService
from bookings.stores import DEFAULT_ROOMS, DEFAULT_USER, InMemoryBookingStore

DEFAULTS: dict[str, Any] = {
    "OPENING_HOUR": 8,
    "CLOSING_HOUR": 22,
    "CHECK_IN_OPENS_MINUTES": 10,
    "CHECK_IN_GRACE_MINUTES": 10,
    "PENALTY_FREE_CANCELLATION_HOURS": 3,
    "STRIKE_BOOKING_THRESHOLD": 3,
    "STRIKE_CEILING": 5,
    "STRIKE_REDUCTION_MODE": StrikeReductionMode.ON_DEMAND.value,
    "BOOKING_HORIZON_DAYS": 28,
    "USER": None,
    "ALLOW_CLIENT_AS_OF": False,
}


def get_options(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    options = dict(DEFAULTS)
    options.update(getattr(settings, "ROOM_BOOKING", {}) or {})
    if overrides:
        options.update(overrides)
    return options


def load_booking_policy(overrides: Mapping[str, Any] | None = None) -> BookingPolicy:
    """Translate ROOM_BOOKING options into a BookingPolicy.

    Raises:
        ValueError: If an option is out of range or the reduction mode is unknown.
    """
    options = get_options(overrides)
    horizon = options["BOOKING_HORIZON_DAYS"]
    return BookingPolicy(
        hours=OperatingHours(
            opening_hour=int(options["OPENING_HOUR"]),
            closing_hour=int(options["CLOSING_HOUR"]),
        ),
        check_in=CheckInWindow(
            opens_before=timedelta(minutes=int(options["CHECK_IN_OPENS_MINUTES"])),
            grace_period=timedelta(minutes=int(options["CHECK_IN_GRACE_MINUTES"])),
        ),
        cancellation=CancellationPolicy(
            penalty_free_notice=timedelta(hours=float(options["PENALTY_FREE_CANCELLATION_HOURS"])),
        ),
        strikes=StrikeLedger(
            booking_threshold=int(options["STRIKE_BOOKING_THRESHOLD"]),
            ceiling=int(options["STRIKE_CEILING"]),
            reduction_mode=StrikeReductionMode(options["STRIKE_REDUCTION_MODE"]),
        ),
        booking_horizon_days=None if horizon is None else int(horizon),
    )


def load_user(overrides: Mapping[str, Any] | None = None) -> User:
    configured = get_options(overrides)["USER"]
    if not configured:
        return DEFAULT_USER
    return User(
        id=configured.get("id", DEFAULT_USER.id),
        name=configured.get("name", DEFAULT_USER.name),
        email=configured.get("email", DEFAULT_USER.email),
    )


def build_booking_service(overrides: Mapping[str, Any] | None = None) -> BookingService:
    """Composition root: one store and one service per call."""
    store = InMemoryBookingStore(rooms=DEFAULT_ROOMS, user=load_user(overrides))
    return BookingService(store, policy=load_booking_policy(overrides))


def client_as_of_allowed(overrides: Mapping[str, Any] | None = None) -> bool:
    """Whether read-only endpoints may evaluate at a client-supplied instant."""
    return bool(get_options(overrides)["ALLOW_CLIENT_AS_OF"])
