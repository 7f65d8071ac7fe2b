import threading
from dataclasses import replace
from typing import Dict, List, Optional
from farmstay.models.bookings import Booking, BookingStatus
from farmstay.models.reservations import CommitOutcome
from farmstay.utils.custom_exceptions import NotFoundException


class InMemoryBookingLedger:
    """Process-local ledger for demo mode and tests.

    Commits for one room are serialized by that room's lock. Nothing is
    shared across processes, so this cannot keep separate users apart.
    """

    def __init__(self, bookings: Optional[List[Booking]] = None):
        self._bookings: Dict[str, Booking] = {}
        self._room_locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        for booking in bookings or []:
            self._bookings[booking.booking_id] = booking

    def _lock_for(self, room_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._room_locks.get(room_id)
            if lock is None:
                lock = threading.Lock()
                self._room_locks[room_id] = lock
            return lock

    def list_by_room(self, room_id: str) -> List[Booking]:
        return [
            replace(b) for b in list(self._bookings.values()) if b.room_id == room_id
        ]

    def list_bookings(self) -> List[Booking]:
        return [replace(b) for b in list(self._bookings.values())]

    def get_booking_by_id(self, booking_id: str) -> Optional[Booking]:
        booking = self._bookings.get(booking_id)
        return replace(booking) if booking else None

    def insert_if_available(self, booking: Booking) -> CommitOutcome:
        with self._lock_for(booking.room_id):
            for existing in self.list_by_room(booking.room_id):
                if existing.holds_room() and existing.overlaps(
                    booking.check_in, booking.check_out
                ):
                    return CommitOutcome.CONFLICT
            self._bookings[booking.booking_id] = replace(booking)
        return CommitOutcome.COMMITTED

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise NotFoundException("booking", booking_id, 404)
        with self._lock_for(booking.room_id):
            booking.status = status
        return replace(booking)
