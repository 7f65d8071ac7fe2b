from enum import Enum
from dataclasses import dataclass
from typing import Optional
from farmstay.models.bookings import Booking


class RejectionReason(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    ROOM_UNAVAILABLE = "ROOM_UNAVAILABLE"
    RACE_LOST = "RACE_LOST"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


class CommitOutcome(str, Enum):
    COMMITTED = "COMMITTED"
    CONFLICT = "CONFLICT"


@dataclass
class ReservationResult:
    booking: Optional[Booking] = None
    rejection: Optional[RejectionReason] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.booking is not None

    @classmethod
    def reserved(cls, booking: Booking) -> "ReservationResult":
        return cls(booking=booking)

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str) -> "ReservationResult":
        return cls(rejection=reason, message=message)
