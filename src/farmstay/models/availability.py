from enum import Enum
from dataclasses import dataclass
from datetime import date


class DayState(str, Enum):
    AVAILABLE = "AVAILABLE"
    BOOKED = "BOOKED"
    PAST = "PAST"


@dataclass
class CalendarDay:
    day: date
    state: DayState
