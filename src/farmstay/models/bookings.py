from enum import Enum
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"


# statuses that keep a room-night occupied
HOLDING_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.PAID})


@dataclass
class Booking:
    booking_id: str
    room_id: str
    guest_name: str
    guest_phone: str
    check_in: date
    check_out: date
    total_amount: Decimal
    status: BookingStatus = BookingStatus.PENDING

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    def holds_room(self) -> bool:
        return self.status in HOLDING_STATUSES

    def overlaps(self, check_in: date, check_out: date) -> bool:
        return check_in < self.check_out and check_out > self.check_in
