"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class RoomId:
    """Identifier of a room in the static catalog."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Room id cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SlotId:
    """Deterministic identifier for a TimeSlot, derived from its start time."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Capacity:
    """Positive integer number of seats in a room."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Capacity must be positive")


@dataclass(frozen=True)
class OperatingHours:
    """Daily window in which one-hour slots can be booked."""

    opening_hour: int = 8
    closing_hour: int = 22

    def __post_init__(self) -> None:
        if not 0 <= self.opening_hour < self.closing_hour <= 24:
            raise ValueError("Operating hours must satisfy 0 <= opening < closing <= 24")

    @property
    def slot_count(self) -> int:
        return self.closing_hour - self.opening_hour


class Amenity(Enum):
    """Equipment a room can offer."""

    WHITEBOARD = "whiteboard"
    PROJECTOR = "projector"
    CHARGER = "charger"

    @property
    def label(self) -> str:
        return _AMENITY_LABELS[self]


_AMENITY_LABELS = {
    Amenity.WHITEBOARD: "Whiteboard",
    Amenity.PROJECTOR: "Projector",
    Amenity.CHARGER: "Power Outlets",
}
