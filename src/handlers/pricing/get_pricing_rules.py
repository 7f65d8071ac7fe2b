import os
import logging
from boto3 import resource

from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.services.pricing_service import PricingRuleService
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import rule_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

pricing_rule_service = PricingRuleService(PricingRuleRepository(table))


def get_pricing_rules(event, context):
    try:
        rules = pricing_rule_service.list_rules()
    except Exception:
        logger.exception("Unhandled error listing pricing rules")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(
        200,
        "successfully retrieved",
        {"count": len(rules), "rules": [rule_to_dict(r) for r in rules]},
    )
