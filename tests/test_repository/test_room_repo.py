import unittest
from unittest.mock import MagicMock
from decimal import Decimal
from botocore.exceptions import ClientError

from farmstay.repository.room_repo import RoomRepository
from farmstay.models.rooms import Room
from farmstay.utils.custom_exceptions import NotFoundException


class TestRoomRepository(unittest.TestCase):

    def setUp(self):
        self.table = MagicMock()
        self.table.name = "test-table"
        self.client = MagicMock()
        self.table.meta.client = self.client
        self.repo = RoomRepository(self.table, self.client)

        self.room = Room(
            room_id="r1",
            name="Coconut Cottage",
            base_price=Decimal("3000"),
            capacity=3,
            description="Cottage under the palms",
            amenities=["Wifi", "Kitchen"],
            images=["https://img/1.jpg"],
        )

    def test_save_room_writes_details_and_catalog(self):
        self.repo.save_room(self.room)

        _, kwargs = self.client.transact_write_items.call_args
        items = [i["Put"]["Item"] for i in kwargs["TransactItems"]]

        self.assertEqual((items[0]["pk"], items[0]["sk"]), ("ROOM#r1", "DETAILS"))
        self.assertEqual((items[1]["pk"], items[1]["sk"]), ("ROOMS", "ROOM#r1"))
        self.assertEqual(items[0]["base_price"], Decimal("3000"))
        self.assertEqual(items[1]["amenities"], ["Wifi", "Kitchen"])

    def test_save_room_client_error(self):
        self.client.transact_write_items.side_effect = ClientError(
            error_response={"Error": {"Message": "Write failed"}},
            operation_name="TransactWriteItems",
        )

        with self.assertRaises(ClientError):
            self.repo.save_room(self.room)

    def test_get_room_by_id(self):
        self.table.get_item.return_value = {
            "Item": {
                "pk": "ROOM#r1",
                "sk": "DETAILS",
                "name": "Coconut Cottage",
                "base_price": Decimal("3000"),
                "capacity": Decimal("3"),
                "amenities": ["Wifi"],
                "images": [],
            }
        }

        room = self.repo.get_room_by_id("r1")

        self.assertEqual(room.room_id, "r1")
        self.assertEqual(room.base_price, Decimal("3000"))
        self.assertEqual(room.capacity, 3)
        self.assertEqual(room.amenities, ["Wifi"])
        self.assertEqual(room.description, "")

    def test_get_room_by_id_missing(self):
        self.table.get_item.return_value = {}

        self.assertIsNone(self.repo.get_room_by_id("nope"))

    def test_get_room_by_id_client_error(self):
        self.table.get_item.side_effect = ClientError(
            error_response={"Error": {"Message": "Get failed"}},
            operation_name="GetItem",
        )

        with self.assertRaises(ClientError):
            self.repo.get_room_by_id("r1")

    def test_list_rooms(self):
        self.table.query.return_value = {
            "Items": [
                {"pk": "ROOMS", "sk": "ROOM#r1", "name": "A", "base_price": Decimal("1000")},
                {"pk": "ROOMS", "sk": "ROOM#r2", "name": "B", "base_price": Decimal("2500.5")},
            ]
        }

        rooms = self.repo.list_rooms()

        self.assertEqual([r.room_id for r in rooms], ["r1", "r2"])
        self.assertEqual(rooms[1].base_price, Decimal("2500.5"))

    def test_list_rooms_follows_pagination(self):
        self.table.query.side_effect = [
            {
                "Items": [{"pk": "ROOMS", "sk": "ROOM#r1", "name": "A", "base_price": Decimal("1000")}],
                "LastEvaluatedKey": {"pk": "ROOMS", "sk": "ROOM#r1"},
            },
            {"Items": [{"pk": "ROOMS", "sk": "ROOM#r2", "name": "B", "base_price": Decimal("2000")}]},
        ]

        rooms = self.repo.list_rooms()

        self.assertEqual([r.room_id for r in rooms], ["r1", "r2"])
        _, kwargs = self.table.query.call_args
        self.assertEqual(kwargs["ExclusiveStartKey"], {"pk": "ROOMS", "sk": "ROOM#r1"})

    def test_delete_room(self):
        self.repo.delete_room("r1")

        _, kwargs = self.client.transact_write_items.call_args
        keys = [i["Delete"]["Key"] for i in kwargs["TransactItems"]]
        self.assertEqual(
            keys,
            [{"pk": "ROOM#r1", "sk": "DETAILS"}, {"pk": "ROOMS", "sk": "ROOM#r1"}],
        )

    def test_delete_missing_room(self):
        self.client.transact_write_items.side_effect = ClientError(
            error_response={
                "Error": {"Code": "TransactionCanceledException"},
                "CancellationReasons": [{"Code": "ConditionalCheckFailed"}, {"Code": "None"}],
            },
            operation_name="TransactWriteItems",
        )

        with self.assertRaises(NotFoundException):
            self.repo.delete_room("nope")

    def test_delete_room_conflict_is_not_reported_missing(self):
        self.client.transact_write_items.side_effect = ClientError(
            error_response={
                "Error": {"Code": "TransactionCanceledException"},
                "CancellationReasons": [{"Code": "TransactionConflict"}, {"Code": "None"}],
            },
            operation_name="TransactWriteItems",
        )

        with self.assertRaises(ClientError) as ctx:
            self.repo.delete_room("r1")

        self.assertNotIsInstance(ctx.exception, NotFoundException)


if __name__ == "__main__":
    unittest.main()
