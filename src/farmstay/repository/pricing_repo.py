from botocore.exceptions import ClientError
import logging
from decimal import Decimal
from typing import List
from boto3.dynamodb.conditions import Key
from farmstay.models.pricing import PricingRule
from farmstay.repository.pagination import query_all
from farmstay.utils.custom_exceptions import NotFoundException
from farmstay.utils.date_utils import parse_date

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
else:
    Table = object


logger = logging.getLogger(__name__)

PRICING_PK = "PRICING"


class PricingRuleRepository:
    def __init__(self, table: Table):
        self.table = table

    def list_rules(self) -> List[PricingRule]:
        try:
            items = query_all(
                self.table,
                Key("pk").eq(PRICING_PK) & Key("sk").begins_with("RULE#"),
            )
        except ClientError as err:
            logger.error(f"Error retrieving pricing rules: {err}")
            raise

        rules = []
        for item in items:
            rules.append(
                PricingRule(
                    rule_id=item["sk"].removeprefix("RULE#"),
                    name=item.get("name", ""),
                    start_date=parse_date(item["start_date"]),
                    end_date=parse_date(item["end_date"]),
                    multiplier=Decimal(str(item["multiplier"])),
                )
            )
        return rules

    def save_rule(self, rule: PricingRule):
        try:
            self.table.put_item(
                Item={
                    "pk": PRICING_PK,
                    "sk": f"RULE#{rule.rule_id}",
                    "name": rule.name,
                    "start_date": rule.start_date.isoformat(),
                    "end_date": rule.end_date.isoformat(),
                    "multiplier": Decimal(str(rule.multiplier)),
                }
            )
        except ClientError as err:
            logger.error(f"Error saving pricing rule {rule.rule_id}: {err}")
            raise

    def delete_rule(self, rule_id: str):
        try:
            self.table.delete_item(
                Key={"pk": PRICING_PK, "sk": f"RULE#{rule_id}"},
                ConditionExpression="attribute_exists(pk)",
            )
        except ClientError as err:
            if (
                err.response.get("Error", {}).get("Code")
                == "ConditionalCheckFailedException"
            ):
                raise NotFoundException("pricing rule", rule_id, 404)
            logger.error(f"Error deleting pricing rule {rule_id}: {err}")
            raise
