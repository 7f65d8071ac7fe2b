import os
import logging
from boto3 import resource

from farmstay.repository.settings_repo import SettingsRepository
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import settings_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

settings_repo = SettingsRepository(table)


def get_settings(event, context):
    try:
        settings = settings_repo.get_settings()
    except Exception:
        logger.exception("Unhandled error reading site settings")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(200, "successfully retrieved", settings_to_dict(settings))
