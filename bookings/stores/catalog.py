"""Static reference data: the room catalog and the default user."""

from bookings.domain import Amenity, Capacity, Room, RoomId, User


def _room(
    room_id: str,
    name: str,
    building: str,
    floor: int,
    capacity: int,
    amenities: set[Amenity],
    qr_code_id: str,
) -> Room:
    return Room(
        id=RoomId(room_id),
        name=name,
        building=building,
        floor=floor,
        capacity=Capacity(capacity),
        amenities=frozenset(amenities),
        qr_code_id=qr_code_id,
        image_ref=f"room{room_id}",
    )


DEFAULT_ROOMS: tuple[Room, ...] = (
    _room("1", "Study Room 101", "Main Library", 1, 4,
          {Amenity.WHITEBOARD, Amenity.CHARGER}, "UBC-ROOM-1-MCLD-1011"),
    _room("2", "Collaboration Space", "Student Center", 2, 8,
          {Amenity.WHITEBOARD, Amenity.PROJECTOR}, "UBC-ROOM-2-NEST-2020"),
    _room("3", "Computer Lab", "Engineering Building", 3, 20,
          {Amenity.PROJECTOR, Amenity.CHARGER}, "UBC-ROOM-3-KAIS-3030"),
    _room("4", "Quiet Study Room", "Main Library", 2, 2,
          {Amenity.CHARGER}, "UBC-ROOM-4-MCLD-2040"),
    _room("5", "Group Study Room", "Science Center", 1, 6,
          {Amenity.WHITEBOARD, Amenity.PROJECTOR, Amenity.CHARGER}, "UBC-ROOM-5-CHEM-1050"),
    _room("6", "Conference Room A", "Business School", 4, 12,
          {Amenity.WHITEBOARD, Amenity.PROJECTOR}, "UBC-ROOM-6-HENN-4060"),
)

DEFAULT_USER = User(id="user-1", name="Demo Student", email="student@example.edu")
