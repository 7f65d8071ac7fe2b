from botocore.exceptions import ClientError
import logging
from decimal import Decimal
from typing import Optional, List
from boto3.dynamodb.conditions import Key
from farmstay.models.rooms import Room
from farmstay.repository.pagination import query_all
from farmstay.utils.custom_exceptions import NotFoundException

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
    from types_boto3_dynamodb import DynamoDBClient
else:
    Table = object
    DynamoDBClient = object


logger = logging.getLogger(__name__)

CATALOG_PK = "ROOMS"


class RoomRepository:
    def __init__(self, table: Table, client: DynamoDBClient = None):
        self.table = table
        self.client = client if client else table.meta.client

    @staticmethod
    def _attributes(room: Room) -> dict:
        return {
            "name": room.name,
            "description": room.description,
            "base_price": Decimal(str(room.base_price)),
            "capacity": room.capacity,
            "amenities": list(room.amenities),
            "images": list(room.images),
        }

    @staticmethod
    def _to_room(room_id: str, item: dict) -> Room:
        return Room(
            room_id=room_id,
            name=item["name"],
            base_price=Decimal(str(item["base_price"])),
            capacity=int(item.get("capacity", 1)),
            description=item.get("description", ""),
            amenities=list(item.get("amenities", [])),
            images=list(item.get("images", [])),
        )

    def save_room(self, room: Room):
        room_item = {
            "pk": f"ROOM#{room.room_id}",
            "sk": "DETAILS",
            **self._attributes(room),
        }
        catalog_item = {
            "pk": CATALOG_PK,
            "sk": f"ROOM#{room.room_id}",
            **self._attributes(room),
        }
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": room_item,
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": catalog_item,
                        }
                    },
                ]
            )
        except ClientError as err:
            logger.error(f"Error saving room {room.room_id}: {err}")
            raise

    def get_room_by_id(self, room_id: str) -> Optional[Room]:
        try:
            response = self.table.get_item(
                Key={"pk": f"ROOM#{room_id}", "sk": "DETAILS"}
            )
        except ClientError as err:
            logger.error(f"Error retrieving room by id {room_id}: {err}")
            raise

        item = response.get("Item")
        if not item:
            return None
        return self._to_room(room_id, item)

    def list_rooms(self) -> List[Room]:
        try:
            items = query_all(
                self.table,
                Key("pk").eq(CATALOG_PK) & Key("sk").begins_with("ROOM#"),
            )
        except ClientError as err:
            logger.error(f"Error retrieving room catalog: {err}")
            raise

        rooms = []
        for item in items:
            room_id = item["sk"].removeprefix("ROOM#")
            rooms.append(self._to_room(room_id, item))
        return rooms

    @staticmethod
    def _room_missing(err: ClientError) -> bool:
        if err.response.get("Error", {}).get("Code") != "TransactionCanceledException":
            return False
        reasons = err.response.get("CancellationReasons") or []
        # the details delete is the only conditional entry
        return bool(reasons) and reasons[0].get("Code") == "ConditionalCheckFailed"

    def delete_room(self, room_id: str):
        # bookings keep their room_id, only the catalog entries go
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Delete": {
                            "TableName": self.table.name,
                            "Key": {"pk": f"ROOM#{room_id}", "sk": "DETAILS"},
                            "ConditionExpression": "attribute_exists(pk)",
                        }
                    },
                    {
                        "Delete": {
                            "TableName": self.table.name,
                            "Key": {"pk": CATALOG_PK, "sk": f"ROOM#{room_id}"},
                        }
                    },
                ]
            )
        except ClientError as err:
            if self._room_missing(err):
                raise NotFoundException("room", room_id, 404)
            logger.error(f"Error deleting room {room_id}: {err}")
            raise
