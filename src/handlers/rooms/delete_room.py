import os
import logging
from boto3 import resource

from farmstay.repository.room_repo import RoomRepository
from farmstay.services.room_service import RoomService
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_exceptions import NotFoundException
from farmstay.utils.custom_response import send_custom_response

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

room_service = RoomService(room_repo=RoomRepository(table))


def delete_room(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    room_id = (event.get("pathParameters") or {}).get("room_id")
    if not room_id:
        return send_custom_response(400, "room_id is required in the path")

    try:
        room_service.delete_room(room_id)
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except Exception:
        logger.exception(f"Unhandled error deleting room {room_id}")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(200, f"Room {room_id} deleted successfully")
