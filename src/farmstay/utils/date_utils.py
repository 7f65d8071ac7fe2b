from datetime import date, datetime, timedelta, timezone
from typing import Iterator


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def parse_date(value: str | date) -> date:
    if isinstance(value, datetime):
        raise ValueError("Expected a calendar date without time component")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Date must be a YYYY-MM-DD string")
    value = value.strip()
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    # fromisoformat also takes compact and week forms
    if parsed.isoformat() != value:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    return parsed


def iter_nights(check_in: date, check_out: date) -> Iterator[date]:
    night = check_in
    while night < check_out:
        yield night
        night += timedelta(days=1)


def from_iso_string(value: str) -> datetime:
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        raise ValueError("Stored datetime must be timezone-aware")
    return dt.astimezone(timezone.utc)
