import os
import logging
from boto3 import resource
from pydantic import ValidationError

from farmstay.repository.booking_repo import BookingRepository
from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.repository.room_repo import RoomRepository
from farmstay.repository.settings_repo import SettingsRepository
from farmstay.services.reservation_service import ReservationService
from farmstay.schemas.bookings import StayQuery
from farmstay.utils.custom_exceptions import InvalidDates, NotFoundException
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import quote_to_dict

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


def get_quote(event, context):
    room_id = (event.get("pathParameters") or {}).get("room_id")
    if not room_id:
        return send_custom_response(400, "room_id is required in the path")

    params = event.get("queryStringParameters") or {}
    if not params.get("check_in") or not params.get("check_out"):
        return send_custom_response(400, "check_in and check_out are required")

    try:
        stay = StayQuery.model_validate(params)
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    try:
        quote = reservation_service.quote_for(room_id, stay.check_in, stay.check_out)
    except InvalidDates as err:
        return send_custom_response(400, str(err))
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except Exception:
        logger.exception(f"Unhandled error quoting room {room_id}")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(200, "Quote calculated", quote_to_dict(quote))
