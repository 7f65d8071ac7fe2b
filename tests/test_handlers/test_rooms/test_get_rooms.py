import importlib
import json
import os
import unittest
from decimal import Decimal
from unittest.mock import MagicMock, patch

from farmstay.models.rooms import Room
from farmstay.utils.custom_exceptions import NotFoundException


class GetRoomsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.env = patch.dict(os.environ, {"TABLE_NAME": "test-table"}, clear=False)
        cls.env.start()
        cls.resource = patch("boto3.resource")
        mock_res = cls.resource.start()
        mock_res.return_value.Table.return_value = MagicMock()
        import handlers.rooms.get_rooms as mod
        cls.mod = importlib.reload(mod)

    @classmethod
    def tearDownClass(cls):
        cls.resource.stop()
        cls.env.stop()

    def setUp(self):
        self.room = Room(room_id="r1", name="Coconut Cottage", base_price=Decimal("3000"), capacity=3)

    def test_lists_rooms(self):
        with patch.object(self.mod.room_service, "list_rooms", return_value=[self.room]):
            resp = self.mod.get_rooms({}, None)

        self.assertEqual(200, resp["statusCode"])
        data = json.loads(resp["body"])["data"]
        self.assertEqual(data["count"], 1)
        self.assertEqual(data["rooms"][0]["base_price"], 3000.0)

    def test_single_room(self):
        with patch.object(self.mod.room_service, "get_room", return_value=self.room) as mock_get:
            resp = self.mod.get_rooms({"pathParameters": {"room_id": "r1"}}, None)

        self.assertEqual(200, resp["statusCode"])
        mock_get.assert_called_once_with("r1")
        self.assertEqual(json.loads(resp["body"])["data"]["name"], "Coconut Cottage")

    def test_single_room_not_found(self):
        with patch.object(
            self.mod.room_service, "get_room", side_effect=NotFoundException("room", "x", 404)
        ):
            resp = self.mod.get_rooms({"pathParameters": {"room_id": "x"}}, None)

        self.assertEqual(404, resp["statusCode"])

    def test_error_returns_500(self):
        with patch.object(self.mod.room_service, "list_rooms", side_effect=RuntimeError("boom")):
            resp = self.mod.get_rooms({}, None)

        self.assertEqual(500, resp["statusCode"])


if __name__ == "__main__":
    unittest.main()
