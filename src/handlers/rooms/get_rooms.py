import os
import logging
from boto3 import resource

from farmstay.repository.room_repo import RoomRepository
from farmstay.services.room_service import RoomService
from farmstay.utils.custom_exceptions import NotFoundException
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import room_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

room_service = RoomService(room_repo=RoomRepository(table))


def get_rooms(event, context):
    room_id = (event.get("pathParameters") or {}).get("room_id")
    try:
        if room_id:
            room = room_service.get_room(room_id)
            return send_custom_response(200, "successfully retrieved", room_to_dict(room))

        rooms = room_service.list_rooms()
        return send_custom_response(
            200,
            "successfully retrieved",
            {"count": len(rooms), "rooms": [room_to_dict(r) for r in rooms]},
        )
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except Exception:
        logger.exception("Unhandled error retrieving rooms")
        return send_custom_response(500, "Internal server error")
