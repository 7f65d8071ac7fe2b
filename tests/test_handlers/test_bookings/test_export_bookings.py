import importlib
import os
import unittest
from unittest.mock import MagicMock, patch


class ExportBookingsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.env = patch.dict(os.environ, {"TABLE_NAME": "test-table"}, clear=False)
        cls.env.start()
        cls.resource = patch("boto3.resource")
        mock_res = cls.resource.start()
        mock_res.return_value.Table.return_value = MagicMock()
        import handlers.bookings.export_bookings as mod
        cls.mod = importlib.reload(mod)

    @classmethod
    def tearDownClass(cls):
        cls.resource.stop()
        cls.env.stop()

    def test_guest_forbidden(self):
        event = {"requestContext": {"authorizer": {"role": "GUEST"}}}
        self.assertEqual(403, self.mod.export_bookings(event, None)["statusCode"])

    def test_returns_csv(self):
        event = {"requestContext": {"authorizer": {"role": "ADMIN"}}}
        with patch.object(self.mod.report_service, "export_csv", return_value='"id"\n'):
            resp = self.mod.export_bookings(event, None)

        self.assertEqual(200, resp["statusCode"])
        self.assertEqual(resp["body"], '"id"\n')
        self.assertTrue(resp["headers"]["Content-Type"].startswith("text/csv"))
        self.assertIn("bookings_export_", resp["headers"]["Content-Disposition"])

    def test_error_returns_500(self):
        event = {"requestContext": {"authorizer": {"role": "ADMIN"}}}
        with patch.object(self.mod.report_service, "export_csv", side_effect=RuntimeError("boom")):
            resp = self.mod.export_bookings(event, None)

        self.assertEqual(500, resp["statusCode"])


if __name__ == "__main__":
    unittest.main()
