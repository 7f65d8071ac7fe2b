from botocore.exceptions import ClientError
import logging
from decimal import Decimal
from farmstay.models.settings import SiteSettings, LongStayDiscount

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types_boto3_dynamodb.service_resource import Table
else:
    Table = object


logger = logging.getLogger(__name__)


class SettingsRepository:
    """Site settings stored as a single item; satisfies ``SettingsProvider``."""

    def __init__(self, table: Table):
        self.table = table

    def get_settings(self) -> SiteSettings:
        try:
            response = self.table.get_item(Key={"pk": "SETTINGS", "sk": "SITE"})
        except ClientError as err:
            logger.error(f"Error retrieving site settings: {err}")
            raise

        item = response.get("Item")
        if not item:
            return SiteSettings()

        # fields missing from a stored discount keep their defaults
        defaults = LongStayDiscount()
        discount = item.get("long_stay_discount") or {}
        return SiteSettings(
            long_stay_discount=LongStayDiscount(
                enabled=bool(discount.get("enabled", defaults.enabled)),
                min_nights=int(discount.get("min_nights", defaults.min_nights)),
                percentage=Decimal(str(discount.get("percentage", defaults.percentage))),
            )
        )

    def save_settings(self, settings: SiteSettings):
        discount = settings.long_stay_discount
        try:
            self.table.put_item(
                Item={
                    "pk": "SETTINGS",
                    "sk": "SITE",
                    "long_stay_discount": {
                        "enabled": discount.enabled,
                        "min_nights": discount.min_nights,
                        "percentage": Decimal(str(discount.percentage)),
                    },
                }
            )
        except ClientError as err:
            logger.error(f"Error saving site settings: {err}")
            raise
