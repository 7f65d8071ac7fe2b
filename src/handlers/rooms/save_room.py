import os
import logging
from boto3 import resource
from pydantic import ValidationError

from farmstay.repository.room_repo import RoomRepository
from farmstay.services.room_service import RoomService
from farmstay.schemas.rooms import RoomRequest
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import room_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

room_service = RoomService(room_repo=RoomRepository(table))


def save_room(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    if not event.get("body"):
        return send_custom_response(400, "Request body is required")

    try:
        req = RoomRequest.model_validate_json(event["body"])
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    room = req.to_room()
    try:
        room_service.save_room(room)
    except Exception:
        logger.exception(f"Unhandled error saving room {room.room_id}")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(201, f"Room {room.room_id} saved successfully", room_to_dict(room))
