import os
import logging
from boto3 import resource

from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.services.pricing_service import PricingRuleService
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_exceptions import NotFoundException
from farmstay.utils.custom_response import send_custom_response

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

pricing_rule_service = PricingRuleService(PricingRuleRepository(table))


def delete_pricing_rule(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    rule_id = (event.get("pathParameters") or {}).get("rule_id")
    if not rule_id:
        return send_custom_response(400, "rule_id is required in the path")

    try:
        pricing_rule_service.delete_rule(rule_id)
    except NotFoundException as err:
        return send_custom_response(err.status_code, str(err))
    except Exception:
        logger.exception(f"Unhandled error deleting pricing rule {rule_id}")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(200, f"Pricing rule {rule_id} deleted successfully")
