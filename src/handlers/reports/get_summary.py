import os
import logging
from boto3 import resource

from farmstay.repository.booking_repo import BookingRepository
from farmstay.services.report_service import ReportService
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_response import send_custom_response

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

report_service = ReportService(BookingRepository(table))


def get_summary(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    try:
        summary = report_service.summary()
    except Exception:
        logger.exception("Unhandled error building booking summary")
        return send_custom_response(500, "Internal server error")

    summary["total_revenue"] = float(summary["total_revenue"])
    summary["monthly_revenue"] = {
        month: float(amount) for month, amount in summary["monthly_revenue"].items()
    }
    return send_custom_response(200, "successfully retrieved", summary)
