import os
import logging
from boto3 import resource

from farmstay.repository.booking_repo import BookingRepository
from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.repository.room_repo import RoomRepository
from farmstay.services.reservation_service import ReservationService
from farmstay.models.bookings import BookingStatus
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import booking_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

reservation_service = ReservationService(
    room_repo=RoomRepository(table),
    pricing_repo=PricingRuleRepository(table),
    ledger=BookingRepository(table),
)


def get_bookings(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    params = event.get("queryStringParameters") or {}
    status = None
    if params.get("status"):
        try:
            status = BookingStatus(params["status"].upper())
        except ValueError:
            allowed = ", ".join(s.value for s in BookingStatus)
            return send_custom_response(400, f"Invalid status. Allowed: {allowed}")

    try:
        bookings = reservation_service.list_bookings()
    except Exception:
        logger.exception("Unhandled error listing bookings")
        return send_custom_response(500, "Internal server error")

    if status:
        bookings = [b for b in bookings if b.status == status]

    return send_custom_response(
        200,
        "Bookings retrieved successfully",
        {
            "count": len(bookings),
            "bookings": [booking_to_dict(b) for b in bookings],
        },
    )
