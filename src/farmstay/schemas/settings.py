from decimal import Decimal
from pydantic import BaseModel, Field
from farmstay.models.settings import LongStayDiscount, SiteSettings


class LongStayDiscountRequest(BaseModel):
    enabled: bool = True
    min_nights: int = Field(default=5, ge=1)
    percentage: Decimal = Field(default=Decimal("20"), ge=0, le=100)


class SettingsRequest(BaseModel):
    long_stay_discount: LongStayDiscountRequest

    def to_settings(self) -> SiteSettings:
        d = self.long_stay_discount
        return SiteSettings(
            long_stay_discount=LongStayDiscount(
                enabled=d.enabled, min_nights=d.min_nights, percentage=d.percentage
            )
        )
