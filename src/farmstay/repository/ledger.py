from typing import List, Optional, Protocol
from farmstay.models.bookings import Booking, BookingStatus
from farmstay.models.reservations import CommitOutcome


class BookingLedger(Protocol):
    """Storage contract the reservation workflow commits against.

    ``insert_if_available`` must re-check the room's holding bookings and
    insert as one step with respect to other inserts for the same room.
    Infrastructure faults during a commit surface as ``PersistenceError``.
    """

    def list_by_room(self, room_id: str) -> List[Booking]: ...

    def list_bookings(self) -> List[Booking]: ...

    def get_booking_by_id(self, booking_id: str) -> Optional[Booking]: ...

    def insert_if_available(self, booking: Booking) -> CommitOutcome: ...

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking: ...
