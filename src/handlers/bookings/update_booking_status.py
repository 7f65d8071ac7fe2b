import os
import logging
from boto3 import resource
from pydantic import ValidationError

from farmstay.repository.booking_repo import BookingRepository
from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.repository.room_repo import RoomRepository
from farmstay.services.reservation_service import ReservationService
from farmstay.schemas.bookings import StatusUpdateRequest
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_exceptions import NotFoundException
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


def update_booking_status(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    booking_id = (event.get("pathParameters") or {}).get("booking_id")
    if not booking_id:
        return send_custom_response(400, "booking_id is required in the path")

    if not event.get("body"):
        return send_custom_response(400, "Request body is required")

    try:
        req = StatusUpdateRequest.model_validate_json(event["body"])
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    try:
        booking = reservation_service.set_status(booking_id, req.status)
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except Exception:
        logger.exception(f"Unhandled error updating booking {booking_id}")
        return send_custom_response(500, "Internal server error")

    logger.info(f"Booking {booking_id} set to {req.status.value}")
    return send_custom_response(
        200, "Booking status updated successfully", booking_to_dict(booking)
    )
