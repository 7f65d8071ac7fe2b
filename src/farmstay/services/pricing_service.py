from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional
from farmstay.models.pricing import PricingRule, Quote, NightlyCharge
from farmstay.models.rooms import Room
from farmstay.models.settings import LongStayDiscount
from farmstay.utils.constants import CURRENCY_QUANTUM
from farmstay.utils.custom_exceptions import InvalidDates
from farmstay.utils.date_utils import iter_nights

DEFAULT_MULTIPLIER = Decimal("1")


def to_currency(amount: Decimal) -> Decimal:
    return amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


def resolve_multiplier(night: date, pricing_rules: Iterable[PricingRule]) -> Decimal:
    """Highest multiplier among the rules covering ``night``, else 1."""
    matches = [Decimal(str(r.multiplier)) for r in pricing_rules if r.covers(night)]
    if not matches:
        return DEFAULT_MULTIPLIER
    return max(matches)


def quote(
    room: Room,
    check_in: date,
    check_out: date,
    pricing_rules: Iterable[PricingRule],
    discount: Optional[LongStayDiscount] = None,
) -> Quote:
    """Price the nights ``[check_in, check_out)`` of ``room``.

    Nightly charges are summed unrounded; only the total, the discount
    and the display average are rounded to whole currency units.
    """
    rules = list(pricing_rules)
    base_price = Decimal(str(room.base_price))

    breakdown = []
    subtotal = Decimal("0")
    for night in iter_nights(check_in, check_out):
        multiplier = resolve_multiplier(night, rules)
        amount = base_price * multiplier
        breakdown.append(NightlyCharge(night=night, multiplier=multiplier, amount=amount))
        subtotal += amount

    nights = len(breakdown)
    if nights == 0:
        raise InvalidDates("stay must be at least one night")

    discount_amount = Decimal("0")
    if discount is not None and discount.applies_to(nights):
        discount_amount = to_currency(subtotal * Decimal(str(discount.percentage)) / 100)

    return Quote(
        nights=nights,
        subtotal=subtotal,
        total_amount=to_currency(subtotal - discount_amount),
        avg_per_night=to_currency(subtotal / nights),
        discount_amount=discount_amount,
        nightly_breakdown=breakdown,
    )


class PricingRuleService:
    def __init__(self, pricing_repo):
        self.pricing_repo = pricing_repo

    def list_rules(self):
        return sorted(self.pricing_repo.list_rules(), key=lambda r: (r.start_date, r.rule_id))

    def save_rule(self, rule: PricingRule):
        self.pricing_repo.save_rule(rule)

    def delete_rule(self, rule_id: str):
        self.pricing_repo.delete_rule(rule_id)
