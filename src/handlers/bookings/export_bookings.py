import os
import logging
from boto3 import resource

from farmstay.repository.booking_repo import BookingRepository
from farmstay.services.report_service import ReportService
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_response import send_custom_response, send_csv_response
from farmstay.utils.date_utils import utc_today

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

report_service = ReportService(BookingRepository(table))


def export_bookings(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    try:
        body = report_service.export_csv()
    except Exception:
        logger.exception("Unhandled error exporting bookings")
        return send_custom_response(500, "Internal server error")

    return send_csv_response(f"bookings_export_{utc_today().isoformat()}.csv", body)
