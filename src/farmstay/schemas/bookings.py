from datetime import date, timedelta
from pydantic import BaseModel, Field, field_validator, model_validator
from farmstay.models.bookings import BookingStatus
from farmstay.utils.constants import MAX_STAY
from farmstay.utils.date_utils import parse_date


class StayQuery(BaseModel):
    check_in: date
    check_out: date

    @field_validator("check_in", "check_out", mode="before")
    @classmethod
    def validate_calendar_date(cls, v):
        return parse_date(v)

    @model_validator(mode="after")
    def validate_length(self):
        if self.check_out - self.check_in > timedelta(days=MAX_STAY):
            raise ValueError(f"Maximum stay is {MAX_STAY} nights")
        return self


class BookingRequest(StayQuery):
    room_id: str = Field(min_length=1)
    guest_name: str = Field(min_length=1, max_length=100)
    guest_phone: str = Field(min_length=7, max_length=20)
    paid: bool = False


class StatusUpdateRequest(BaseModel):
    status: BookingStatus

    @field_validator("status", mode="before")
    @classmethod
    def normalise_status(cls, v):
        return v.upper() if isinstance(v, str) else v
