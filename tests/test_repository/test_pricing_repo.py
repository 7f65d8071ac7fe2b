import unittest
from unittest.mock import MagicMock
from datetime import date
from decimal import Decimal
from botocore.exceptions import ClientError

from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.models.pricing import PricingRule
from farmstay.utils.custom_exceptions import NotFoundException


class TestPricingRuleRepository(unittest.TestCase):

    def setUp(self):
        self.table = MagicMock()
        self.repo = PricingRuleRepository(self.table)

    def test_list_rules(self):
        self.table.query.return_value = {
            "Items": [
                {
                    "pk": "PRICING",
                    "sk": "RULE#pr1",
                    "name": "December Peak",
                    "start_date": "2024-12-20",
                    "end_date": "2025-01-05",
                    "multiplier": Decimal("1.5"),
                }
            ]
        }

        rules = self.repo.list_rules()

        self.assertEqual(
            rules,
            [
                PricingRule(
                    rule_id="pr1",
                    name="December Peak",
                    start_date=date(2024, 12, 20),
                    end_date=date(2025, 1, 5),
                    multiplier=Decimal("1.5"),
                )
            ],
        )

    def test_list_rules_follows_pagination(self):
        def rule_item(rule_id, start, end, multiplier):
            return {
                "pk": "PRICING",
                "sk": f"RULE#{rule_id}",
                "name": rule_id,
                "start_date": start,
                "end_date": end,
                "multiplier": Decimal(multiplier),
            }

        self.table.query.side_effect = [
            {
                "Items": [rule_item("pr1", "2024-12-20", "2025-01-05", "1.5")],
                "LastEvaluatedKey": {"pk": "PRICING", "sk": "RULE#pr1"},
            },
            {"Items": [rule_item("pr2", "2025-05-01", "2025-05-31", "1.2")]},
        ]

        rules = self.repo.list_rules()

        self.assertEqual([r.rule_id for r in rules], ["pr1", "pr2"])
        self.assertEqual(rules[1].multiplier, Decimal("1.2"))
        self.assertEqual(self.table.query.call_count, 2)

    def test_list_rules_client_error(self):
        self.table.query.side_effect = ClientError(
            error_response={"Error": {"Message": "Query failed"}},
            operation_name="Query",
        )

        with self.assertRaises(ClientError):
            self.repo.list_rules()

    def test_save_rule(self):
        self.repo.save_rule(
            PricingRule(
                rule_id="pr1",
                name="December Peak",
                start_date=date(2024, 12, 20),
                end_date=date(2025, 1, 5),
                multiplier=Decimal("1.5"),
            )
        )

        _, kwargs = self.table.put_item.call_args
        self.assertEqual(
            kwargs["Item"],
            {
                "pk": "PRICING",
                "sk": "RULE#pr1",
                "name": "December Peak",
                "start_date": "2024-12-20",
                "end_date": "2025-01-05",
                "multiplier": Decimal("1.5"),
            },
        )

    def test_delete_missing_rule(self):
        self.table.delete_item.side_effect = ClientError(
            error_response={"Error": {"Code": "ConditionalCheckFailedException"}},
            operation_name="DeleteItem",
        )

        with self.assertRaises(NotFoundException):
            self.repo.delete_rule("nope")

    def test_delete_rule_other_error(self):
        self.table.delete_item.side_effect = ClientError(
            error_response={"Error": {"Code": "InternalServerError"}},
            operation_name="DeleteItem",
        )

        with self.assertRaises(ClientError):
            self.repo.delete_rule("pr1")


if __name__ == "__main__":
    unittest.main()
