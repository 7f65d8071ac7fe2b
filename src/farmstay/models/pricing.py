from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List


@dataclass
class PricingRule:
    rule_id: str
    name: str
    start_date: date
    end_date: date
    multiplier: Decimal

    def covers(self, night: date) -> bool:
        return self.start_date <= night <= self.end_date


@dataclass
class NightlyCharge:
    night: date
    multiplier: Decimal
    amount: Decimal


@dataclass
class Quote:
    nights: int
    subtotal: Decimal
    total_amount: Decimal
    avg_per_night: Decimal
    discount_amount: Decimal = Decimal("0")
    nightly_breakdown: List[NightlyCharge] = field(default_factory=list)
