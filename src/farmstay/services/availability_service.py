import calendar
from datetime import date
from typing import List, Optional
from farmstay.models.availability import CalendarDay, DayState
from farmstay.repository.ledger import BookingLedger
from farmstay.utils.custom_exceptions import InvalidDates
from farmstay.utils.date_utils import utc_today


class AvailabilityService:
    def __init__(self, ledger: BookingLedger):
        self.ledger = ledger

    def is_available(self, room_id: str, check_in: date, check_out: date) -> bool:
        if check_in >= check_out:
            raise InvalidDates("check_out must be after check_in")
        for booking in self.ledger.list_by_room(room_id):
            if booking.holds_room() and booking.overlaps(check_in, check_out):
                return False
        return True

    def month_calendar(
        self, room_id: str, year: int, month: int, today: Optional[date] = None
    ) -> List[CalendarDay]:
        if not 1 <= month <= 12 or not 1 <= year <= 9999:
            raise InvalidDates(f"invalid month {year}-{month}")
        today = today or utc_today()
        holding = [b for b in self.ledger.list_by_room(room_id) if b.holds_room()]

        days = []
        for day_no in range(1, calendar.monthrange(year, month)[1] + 1):
            day = date(year, month, day_no)
            if day < today:
                state = DayState.PAST
            elif any(b.check_in <= day < b.check_out for b in holding):
                state = DayState.BOOKED
            else:
                state = DayState.AVAILABLE
            days.append(CalendarDay(day=day, state=state))
        return days
