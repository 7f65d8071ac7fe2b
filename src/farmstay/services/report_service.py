import csv
import io
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from farmstay.models.bookings import BookingStatus
from farmstay.utils.date_utils import utc_today

REPORT_MONTHS = 6

CSV_HEADER = [
    "id",
    "guestName",
    "guestPhone",
    "roomId",
    "checkIn",
    "checkOut",
    "amount",
    "status",
    "createdAt",
]


def _month_keys(today: date, count: int) -> List[str]:
    keys = []
    year, month = today.year, today.month
    for _ in range(count):
        keys.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(keys))


class ReportService:
    def __init__(self, ledger):
        self.ledger = ledger

    def summary(self, today: Optional[date] = None) -> Dict:
        """Status counts plus PAID revenue, overall and per month.

        Monthly revenue covers the current month and the five before it,
        bucketed by the UTC month the booking was created in.
        """
        today = today or utc_today()
        bookings = self.ledger.list_bookings()
        months = _month_keys(today, REPORT_MONTHS)
        monthly: Dict[str, Decimal] = {m: Decimal("0") for m in months}
        counts = {s.value: 0 for s in BookingStatus}
        total_revenue = Decimal("0")

        for b in bookings:
            counts[b.status.value] += 1
            if b.status != BookingStatus.PAID:
                continue
            total_revenue += b.total_amount
            key = b.created_at.strftime("%Y-%m")
            if key in monthly:
                monthly[key] += b.total_amount

        return {
            "total_bookings": len(bookings),
            "paid_bookings": counts[BookingStatus.PAID.value],
            "pending_bookings": counts[BookingStatus.PENDING.value],
            "failed_bookings": counts[BookingStatus.FAILED.value],
            "total_revenue": total_revenue,
            "months": months,
            "monthly_revenue": monthly,
        }

    def export_csv(self) -> str:
        bookings = sorted(self.ledger.list_bookings(), key=lambda b: b.created_at)
        out = io.StringIO()
        writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for b in bookings:
            writer.writerow(
                [
                    b.booking_id,
                    b.guest_name,
                    b.guest_phone,
                    b.room_id,
                    b.check_in.isoformat(),
                    b.check_out.isoformat(),
                    f"{b.total_amount:.2f}",
                    b.status.value,
                    b.created_at.isoformat(),
                ]
            )
        return out.getvalue()
