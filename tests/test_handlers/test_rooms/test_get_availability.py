import importlib
import json
import os
import unittest
from datetime import date
from unittest.mock import MagicMock, patch

from farmstay.utils.custom_exceptions import InvalidDates


class GetAvailabilityTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.env = patch.dict(os.environ, {"TABLE_NAME": "test-table"}, clear=False)
        cls.env.start()
        cls.resource = patch("boto3.resource")
        mock_res = cls.resource.start()
        mock_res.return_value.Table.return_value = MagicMock()
        import handlers.rooms.get_availability as mod
        cls.mod = importlib.reload(mod)

    @classmethod
    def tearDownClass(cls):
        cls.resource.stop()
        cls.env.stop()

    def setUp(self):
        self.p_available = patch.object(self.mod.reservation_service, "is_available")
        self.mock_available = self.p_available.start()

    def tearDown(self):
        self.p_available.stop()

    def _event(self, params):
        return {"pathParameters": {"room_id": "r1"}, "queryStringParameters": params}

    def test_missing_params(self):
        resp = self.mod.get_availability(self._event(None), None)
        self.assertEqual(400, resp["statusCode"])

    def test_available(self):
        self.mock_available.return_value = True

        resp = self.mod.get_availability(
            self._event({"check_in": "2024-06-10", "check_out": "2024-06-12"}), None
        )

        self.assertEqual(200, resp["statusCode"])
        self.mock_available.assert_called_once_with("r1", date(2024, 6, 10), date(2024, 6, 12))
        self.assertTrue(json.loads(resp["body"])["data"]["available"])

    def test_unavailable(self):
        self.mock_available.return_value = False

        resp = self.mod.get_availability(
            self._event({"check_in": "2024-06-10", "check_out": "2024-06-12"}), None
        )

        self.assertFalse(json.loads(resp["body"])["data"]["available"])

    def test_invalid_dates(self):
        self.mock_available.side_effect = InvalidDates("check_in cannot be in the past")

        resp = self.mod.get_availability(
            self._event({"check_in": "2020-06-10", "check_out": "2020-06-12"}), None
        )

        self.assertEqual(400, resp["statusCode"])


if __name__ == "__main__":
    unittest.main()
