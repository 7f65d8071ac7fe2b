import os
import logging
from boto3 import resource
from pydantic import ValidationError

from farmstay.repository.booking_repo import BookingRepository
from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.repository.room_repo import RoomRepository
from farmstay.repository.settings_repo import SettingsRepository
from farmstay.services.reservation_service import ReservationService
from farmstay.models.reservations import RejectionReason
from farmstay.schemas.bookings import BookingRequest
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
    settings_provider=SettingsRepository(table),
)

REJECTION_STATUS = {
    RejectionReason.INVALID_INPUT: 400,
    RejectionReason.ROOM_UNAVAILABLE: 409,
    RejectionReason.RACE_LOST: 409,
    RejectionReason.PERSISTENCE_ERROR: 503,
}


def create_booking(event, context):
    if not event.get("body"):
        return send_custom_response(400, "Request body is required")

    try:
        req = BookingRequest.model_validate_json(event["body"])
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    try:
        result = reservation_service.reserve(
            room_id=req.room_id,
            guest_name=req.guest_name,
            guest_phone=req.guest_phone,
            check_in=req.check_in,
            check_out=req.check_out,
            paid=req.paid,
        )
    except Exception:
        logger.exception("Unhandled error creating booking")
        return send_custom_response(500, "Internal server error")

    if result.ok:
        return send_custom_response(
            201, "Booking created successfully", booking_to_dict(result.booking)
        )

    return send_custom_response(
        REJECTION_STATUS[result.rejection],
        result.message,
        {"reason": result.rejection.value},
    )
