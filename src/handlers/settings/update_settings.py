import os
import logging
from boto3 import resource
from pydantic import ValidationError

from farmstay.repository.settings_repo import SettingsRepository
from farmstay.schemas.settings import SettingsRequest
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import settings_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

settings_repo = SettingsRepository(table)


def update_settings(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    if not event.get("body"):
        return send_custom_response(400, "Request body is required")

    try:
        req = SettingsRequest.model_validate_json(event["body"])
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    settings = req.to_settings()
    try:
        settings_repo.save_settings(settings)
    except Exception:
        logger.exception("Unhandled error saving site settings")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(200, "Settings updated successfully", settings_to_dict(settings))
