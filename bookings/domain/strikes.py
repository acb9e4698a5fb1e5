"""Strike ledger: penalty points that gate booking permission."""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bookings.domain.models import User

logger = logging.getLogger(__name__)


class StrikeReductionMode(Enum):
    """How often reduce_strikes may take effect.

    ON_DEMAND reduces on every call. ONCE_PER_DAY reduces at most once per
    calendar day, keyed on User.last_strike_reduction.
    """

    ON_DEMAND = "on_demand"
    ONCE_PER_DAY = "once_per_day"


@dataclass(frozen=True)
class StrikeLedger:
    """Bounded strike counter rules.

    The ledger mutates the User record handed to it; callers own persistence.
    """

    booking_threshold: int = 3
    ceiling: int = 5
    reduction_mode: StrikeReductionMode = StrikeReductionMode.ON_DEMAND

    def __post_init__(self) -> None:
        if not 0 < self.booking_threshold <= self.ceiling:
            raise ValueError("Strike threshold must be between 1 and the ceiling")

    def add_strike(self, user: User) -> bool:
        """Add one strike unless the ceiling is reached. Returns True if added."""
        if user.strikes >= self.ceiling:
            return False
        user.strikes += 1
        logger.info("Strike added, user %s now has %d strikes", user.id, user.strikes)
        return True

    def reduce_strikes(self, user: User, now: datetime) -> bool:
        """Remove one strike if any. Returns True if a strike was removed."""
        if user.strikes <= 0:
            return False
        if self.reduction_mode is StrikeReductionMode.ONCE_PER_DAY and self._reduced_on(user, now):
            logger.warning(
                "Strike reduction refused for user %s, already reduced on %s",
                user.id,
                now.date(),
            )
            return False
        user.strikes -= 1
        user.last_strike_reduction = now
        logger.info("Strike removed, user %s now has %d strikes", user.id, user.strikes)
        return True

    def ensure_within_ceiling(self, user: User) -> None:
        """Raise ValueError if user was built with more strikes than the ceiling allows."""
        if user.strikes > self.ceiling:
            raise ValueError(
                f"User {user.id} has {user.strikes} strikes, above the ceiling of {self.ceiling}"
            )

    def can_book_room(self, user: User) -> bool:
        return user.strikes < self.booking_threshold

    @staticmethod
    def _reduced_on(user: User, now: datetime) -> bool:
        last = user.last_strike_reduction
        return last is not None and last.date() == now.date()
