from botocore.exceptions import ClientError
import logging
from typing import Optional, List
from boto3.dynamodb.conditions import Key
from farmstay.models.bookings import Booking, BookingStatus
from farmstay.models.reservations import CommitOutcome
from farmstay.repository.pagination import query_all
from farmstay.utils.constants import COMMIT_ATTEMPTS
from farmstay.utils.custom_exceptions import NotFoundException, PersistenceError
from farmstay.utils.date_utils import parse_date, from_iso_string
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
    from types_boto3_dynamodb import DynamoDBClient
else:
    Table = object
    DynamoDBClient = object


logger = logging.getLogger(__name__)

LEDGER_SK = "LEDGER"
ALL_BOOKINGS_PK = "BOOKINGS"


class BookingRepository:
    """DynamoDB booking ledger.

    Every booking is written three times: by id, under its room and into
    the global listing. Each room also owns a ``LEDGER`` item whose
    ``version`` is bumped by every write touching that room, so a commit
    that read a stale set of bookings is cancelled by DynamoDB and retried.
    """

    def __init__(self, table: Table, client: DynamoDBClient = None):
        self.table = table
        self.client = client if client else table.meta.client

    @staticmethod
    def _keys(booking: Booking) -> List[dict]:
        return [
            {"pk": f"BOOKING#{booking.booking_id}", "sk": "DETAILS"},
            {
                "pk": f"ROOM#{booking.room_id}",
                "sk": f"BOOKING#{booking.check_in.isoformat()}#{booking.booking_id}",
            },
            {
                "pk": ALL_BOOKINGS_PK,
                "sk": f"CREATED#{booking.created_at.isoformat()}#{booking.booking_id}",
            },
        ]

    @staticmethod
    def _attributes(booking: Booking) -> dict:
        return {
            "booking_id": booking.booking_id,
            "room_id": booking.room_id,
            "guest_name": booking.guest_name,
            "guest_phone": booking.guest_phone,
            "check_in": booking.check_in.isoformat(),
            "check_out": booking.check_out.isoformat(),
            "total_amount": Decimal(str(booking.total_amount)),
            "booking_status": booking.status.value,
            "created_at": booking.created_at.isoformat(),
        }

    @staticmethod
    def _to_booking(item: dict) -> Booking:
        return Booking(
            booking_id=item["booking_id"],
            room_id=item["room_id"],
            guest_name=item["guest_name"],
            guest_phone=item["guest_phone"],
            check_in=parse_date(item["check_in"]),
            check_out=parse_date(item["check_out"]),
            total_amount=Decimal(str(item["total_amount"])),
            status=BookingStatus(item["booking_status"]),
            created_at=from_iso_string(item["created_at"]),
        )

    def list_by_room(self, room_id: str, consistent: bool = False) -> List[Booking]:
        try:
            items = query_all(
                self.table,
                Key("pk").eq(f"ROOM#{room_id}") & Key("sk").begins_with("BOOKING#"),
                consistent=consistent,
            )
        except ClientError as err:
            logger.error(f"Error retrieving bookings for room {room_id}: {err}")
            raise
        return [self._to_booking(item) for item in items]

    def list_bookings(self) -> List[Booking]:
        try:
            items = query_all(
                self.table,
                Key("pk").eq(ALL_BOOKINGS_PK) & Key("sk").begins_with("CREATED#"),
            )
        except ClientError as err:
            logger.error(f"Error retrieving bookings: {err}")
            raise
        return [self._to_booking(item) for item in items]

    def get_booking_by_id(self, booking_id: str) -> Optional[Booking]:
        try:
            response = self.table.get_item(
                Key={"pk": f"BOOKING#{booking_id}", "sk": "DETAILS"}
            )
        except ClientError as err:
            logger.error(f"Error retrieving booking {booking_id}: {err}")
            raise

        item = response.get("Item")
        if not item:
            return None
        return self._to_booking(item)

    def _ledger_version(self, room_id: str) -> int:
        response = self.table.get_item(
            Key={"pk": f"ROOM#{room_id}", "sk": LEDGER_SK}, ConsistentRead=True
        )
        item = response.get("Item")
        if not item:
            return 0
        return int(item["version"])

    def _commit_items(self, booking: Booking, expected_version: int) -> List[dict]:
        attributes = self._attributes(booking)
        items = [
            {
                "Update": {
                    "TableName": self.table.name,
                    "Key": {"pk": f"ROOM#{booking.room_id}", "sk": LEDGER_SK},
                    "UpdateExpression": "SET #version = :next",
                    "ConditionExpression": "attribute_not_exists(pk) OR #version = :expected",
                    "ExpressionAttributeNames": {"#version": "version"},
                    "ExpressionAttributeValues": {
                        ":next": expected_version + 1,
                        ":expected": expected_version,
                    },
                }
            }
        ]
        for key in self._keys(booking):
            items.append(
                {
                    "Put": {
                        "TableName": self.table.name,
                        "Item": {**key, **attributes},
                        "ConditionExpression": "attribute_not_exists(pk)",
                    }
                }
            )
        return items

    @staticmethod
    def _is_version_conflict(err: ClientError) -> bool:
        code = err.response.get("Error", {}).get("Code")
        if code == "TransactionConflictException":
            return True
        if code != "TransactionCanceledException":
            return False
        reasons = err.response.get("CancellationReasons") or []
        if not reasons:
            return True
        # only the ledger item (first entry) may fail its condition
        return reasons[0].get("Code") in ("ConditionalCheckFailed", "TransactionConflict")

    def insert_if_available(self, booking: Booking) -> CommitOutcome:
        for attempt in range(1, COMMIT_ATTEMPTS + 1):
            try:
                version = self._ledger_version(booking.room_id)
                existing = self.list_by_room(booking.room_id, consistent=True)
            except ClientError as err:
                raise PersistenceError(
                    f"ledger unavailable for room {booking.room_id}"
                ) from err

            if any(
                b.holds_room() and b.overlaps(booking.check_in, booking.check_out)
                for b in existing
            ):
                return CommitOutcome.CONFLICT

            try:
                self.client.transact_write_items(
                    TransactItems=self._commit_items(booking, version)
                )
                return CommitOutcome.COMMITTED
            except ClientError as err:
                if self._is_version_conflict(err):
                    logger.info(
                        f"Ledger for room {booking.room_id} moved during commit "
                        f"of {booking.booking_id} (attempt {attempt})"
                    )
                    continue
                logger.error(f"Error committing booking {booking.booking_id}: {err}")
                raise PersistenceError(
                    f"could not write booking {booking.booking_id}"
                ) from err

        raise PersistenceError(
            f"room {booking.room_id} kept changing, gave up after {COMMIT_ATTEMPTS} attempts"
        )

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        booking = self.get_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundException("booking", booking_id, 404)

        items = [
            {
                "Update": {
                    "TableName": self.table.name,
                    "Key": {"pk": f"ROOM#{booking.room_id}", "sk": LEDGER_SK},
                    "UpdateExpression": "ADD #version :one",
                    "ExpressionAttributeNames": {"#version": "version"},
                    "ExpressionAttributeValues": {":one": 1},
                }
            }
        ]
        for key in self._keys(booking):
            items.append(
                {
                    "Update": {
                        "TableName": self.table.name,
                        "Key": key,
                        "UpdateExpression": "SET #booking_status = :new_value",
                        "ExpressionAttributeNames": {
                            "#booking_status": "booking_status",
                        },
                        "ExpressionAttributeValues": {
                            ":new_value": status.value,
                        },
                        "ConditionExpression": "attribute_exists(pk)",
                    }
                }
            )

        try:
            self.client.transact_write_items(TransactItems=items)
        except ClientError as err:
            logger.error(f"Error updating booking {booking_id} status: {err}")
            raise

        booking.status = status
        return booking
