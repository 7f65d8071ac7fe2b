import os
import logging
from boto3 import resource
from pydantic import ValidationError

from farmstay.repository.pricing_repo import PricingRuleRepository
from farmstay.services.pricing_service import PricingRuleService
from farmstay.schemas.pricing import PricingRuleRequest
from farmstay.utils.authorization import require_admin
from farmstay.utils.custom_response import send_custom_response
from farmstay.utils.serializers import rule_to_dict

TABLE_NAME = os.environ.get("TABLE_NAME")
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")

logger = logging.getLogger()
logger.setLevel(logging.INFO)

dynamodb = resource("dynamodb", region_name=AWS_REGION)
table = dynamodb.Table(TABLE_NAME)

pricing_rule_service = PricingRuleService(PricingRuleRepository(table))


def save_pricing_rule(event, context):
    denied = require_admin(event)
    if denied:
        return denied

    if not event.get("body"):
        return send_custom_response(400, "Request body is required")

    try:
        req = PricingRuleRequest.model_validate_json(event["body"])
    except ValidationError as e:
        formatted = "; ".join(f"{err['msg']}" for err in e.errors())
        return send_custom_response(400, formatted)

    rule = req.to_rule()
    try:
        pricing_rule_service.save_rule(rule)
    except Exception:
        logger.exception(f"Unhandled error saving pricing rule {rule.rule_id}")
        return send_custom_response(500, "Internal server error")

    return send_custom_response(201, "Pricing rule saved successfully", rule_to_dict(rule))
