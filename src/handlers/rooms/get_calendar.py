import os
import logging
from boto3 import resource

from farmstay.repository.booking_repo import BookingRepository
from farmstay.services.availability_service import AvailabilityService
from farmstay.utils.custom_exceptions import InvalidDates
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.date_utils import utc_today

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

availability_service = AvailabilityService(BookingRepository(table))


def get_calendar(event, context):
    room_id = (event.get("pathParameters") or {}).get("room_id")
    if not room_id:
        return send_custom_response(400, "room_id is required in the path")

    params = event.get("queryStringParameters") or {}
    today = utc_today()
    try:
        year = int(params.get("year", today.year))
        month = int(params.get("month", today.month))
    except ValueError:
        return send_custom_response(400, "year and month must be integers")

    try:
        days = availability_service.month_calendar(room_id, year, month, today=today)
    except InvalidDates as err:
        return send_custom_response(400, str(err))
    except Exception:
        logger.exception(f"Unhandled error building calendar for room {room_id}")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(
        200,
        "successfully retrieved",
        {
            "room_id": room_id,
            "year": year,
            "month": month,
            "days": [{"date": d.day.isoformat(), "state": d.state.value} for d in days],
        },
    )
