from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import uuid4
from pydantic import BaseModel, Field, field_validator, model_validator
from farmstay.models.pricing import PricingRule
from farmstay.utils.date_utils import parse_date


class PricingRuleRequest(BaseModel):
    rule_id: Optional[str] = None
    name: str = Field(min_length=1, max_length=100)
    start_date: date
    end_date: date
    multiplier: Decimal = Field(ge=0)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_calendar_date(cls, v):
        return parse_date(v)

    @model_validator(mode="after")
    def validate_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    def to_rule(self) -> PricingRule:
        return PricingRule(
            rule_id=self.rule_id or str(uuid4()),
            name=self.name,
            start_date=self.start_date,
            end_date=self.end_date,
            multiplier=self.multiplier,
        )
