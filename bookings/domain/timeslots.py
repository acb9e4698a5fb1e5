"""Hour-granularity interval helpers and deterministic slot identity."""

import hashlib
from datetime import datetime
from uuid import UUID

from bookings.domain.value_objects import SlotId

SLOT_KEY_FORMAT = "%Y-%m-%d-%H-%M"

# Slot ids keep 48 bits of the digest, so two distinct minutes collide with
# probability about 2**-48. Known and accepted.
_SLOT_ID_BITS = 48


def slot_key(start_time: datetime) -> str:
    """Minute-precision text key of a slot start time."""
    return start_time.strftime(SLOT_KEY_FORMAT)


def slot_id_for(start_time: datetime) -> SlotId:
    """Return the stable identifier of the slot starting at start_time.

    The id depends only on the start time truncated to the minute, so the
    same slot gets the same id on every recomputation and in every process.
    """
    digest = hashlib.sha256(slot_key(start_time).encode("utf-8")).digest()
    suffix = int.from_bytes(digest[: _SLOT_ID_BITS // 8], "big")
    return SlotId(value=UUID(f"00000000-0000-0000-0000-{suffix:012x}"))


def truncate_to_hour(moment: datetime) -> datetime:
    return moment.replace(minute=0, second=0, microsecond=0)


def overlaps_by_hour(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    """Return True if the two intervals conflict when compared by whole hours.

    Interval a conflicts with b when a starts in an hour strictly before the
    hour b ends and a ends in an hour strictly after the hour b starts.
    A 9:00-10:00 interval therefore conflicts with the 9:00-10:00 slot but
    not with 10:00-11:00.
    """
    return (
        truncate_to_hour(a_start) < truncate_to_hour(b_end)
        and truncate_to_hour(a_end) > truncate_to_hour(b_start)
    )
