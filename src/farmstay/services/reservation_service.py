import logging
from datetime import date
from typing import Callable, List, Optional, Tuple
from uuid import uuid4
from farmstay.models.bookings import Booking, BookingStatus
from farmstay.models.pricing import Quote
from farmstay.models.reservations import CommitOutcome, RejectionReason, ReservationResult
from farmstay.models.rooms import Room
from farmstay.models.settings import LongStayDiscount, SettingsProvider
from farmstay.repository.ledger import BookingLedger
from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.repository.room_repo import RoomRepository
from farmstay.services.availability_service import AvailabilityService
from farmstay.services.pricing_service import quote
from farmstay.utils.custom_exceptions import InvalidDates, NotFoundException, PersistenceError
from farmstay.utils.date_utils import parse_date, utc_today

logger = logging.getLogger(__name__)


class ReservationService:
    """Booking workflow: validate, check, quote, then commit.

    ``reserve`` never raises for business outcomes. Bad input, a taken
    room and a lost commit race all come back as a rejected
    ``ReservationResult``; only faults outside the commit propagate.
    """

    def __init__(
        self,
        room_repo: RoomRepository,
        pricing_repo: PricingRuleRepository,
        ledger: BookingLedger,
        settings_provider: Optional[SettingsProvider] = None,
        today: Callable[[], date] = utc_today,
    ):
        self.room_repo = room_repo
        self.pricing_repo = pricing_repo
        self.ledger = ledger
        self.settings_provider = settings_provider
        self.today = today
        self.availability = AvailabilityService(ledger)

    def _discount(self) -> Optional[LongStayDiscount]:
        if self.settings_provider is None:
            return None
        return self.settings_provider.get_settings().long_stay_discount

    @staticmethod
    def _parse_dates(check_in, check_out) -> Tuple[date, date]:
        try:
            return parse_date(check_in), parse_date(check_out)
        except ValueError as err:
            raise InvalidDates(str(err))

    def _validate_dates(self, check_in, check_out) -> Tuple[date, date]:
        check_in, check_out = self._parse_dates(check_in, check_out)
        if check_in >= check_out:
            raise InvalidDates("check_out must be after check_in")
        if check_in < self.today():
            raise InvalidDates("check_in cannot be in the past")
        return check_in, check_out

    def _validate(self, room_id: str, check_in, check_out) -> Tuple[Room, date, date]:
        check_in, check_out = self._validate_dates(check_in, check_out)
        room = self.room_repo.get_room_by_id(room_id)
        if room is None:
            raise NotFoundException("room", room_id, 404)
        return room, check_in, check_out

    def quote_for(self, room_id: str, check_in, check_out) -> Quote:
        room, check_in, check_out = self._validate(room_id, check_in, check_out)
        return quote(
            room, check_in, check_out, self.pricing_repo.list_rules(), self._discount()
        )

    def is_available(self, room_id: str, check_in, check_out) -> bool:
        # past ranges are answered too; only the date order is checked
        check_in, check_out = self._parse_dates(check_in, check_out)
        return self.availability.is_available(room_id, check_in, check_out)

    def reserve(
        self,
        room_id: str,
        guest_name: str,
        guest_phone: str,
        check_in,
        check_out,
        paid: bool = False,
    ) -> ReservationResult:
        if not (guest_name or "").strip() or not (guest_phone or "").strip():
            return ReservationResult.rejected(
                RejectionReason.INVALID_INPUT, "guest name and phone are required"
            )
        try:
            room, check_in, check_out = self._validate(room_id, check_in, check_out)
        except (InvalidDates, NotFoundException) as err:
            logger.info(f"Rejected reservation for room {room_id}: {err}")
            return ReservationResult.rejected(RejectionReason.INVALID_INPUT, str(err))

        if not self.availability.is_available(room_id, check_in, check_out):
            logger.info(f"Room {room_id} unavailable for {check_in} to {check_out}")
            return ReservationResult.rejected(
                RejectionReason.ROOM_UNAVAILABLE,
                "room is already booked for these dates",
            )

        price = quote(
            room, check_in, check_out, self.pricing_repo.list_rules(), self._discount()
        )

        booking = Booking(
            booking_id=str(uuid4()),
            room_id=room_id,
            guest_name=guest_name.strip(),
            guest_phone=guest_phone.strip(),
            check_in=check_in,
            check_out=check_out,
            total_amount=price.total_amount,
            status=BookingStatus.PAID if paid else BookingStatus.PENDING,
        )

        try:
            outcome = self.ledger.insert_if_available(booking)
        except PersistenceError as err:
            logger.error(f"Could not commit booking for room {room_id}: {err}")
            return ReservationResult.rejected(
                RejectionReason.PERSISTENCE_ERROR, "booking could not be saved, try again"
            )

        if outcome == CommitOutcome.CONFLICT:
            logger.info(f"Room {room_id} taken during commit for {check_in} to {check_out}")
            return ReservationResult.rejected(
                RejectionReason.RACE_LOST,
                "room was just booked for these dates",
            )

        logger.info(
            f"Booking {booking.booking_id} committed for room {room_id} "
            f"({booking.status.value}, {booking.total_amount})"
        )
        return ReservationResult.reserved(booking)

    def set_status(self, booking_id: str, status) -> Booking:
        # admin override: any status may replace any other
        return self.ledger.update_status(booking_id, BookingStatus(status))

    def get_booking(self, booking_id: str) -> Booking:
        booking = self.ledger.get_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundException("booking", booking_id, 404)
        return booking

    def list_bookings(self) -> List[Booking]:
        return sorted(self.ledger.list_bookings(), key=lambda b: b.created_at, reverse=True)
