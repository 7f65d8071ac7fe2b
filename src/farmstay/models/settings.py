from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol


@dataclass
class LongStayDiscount:
    enabled: bool = True
    min_nights: int = 5
    percentage: Decimal = Decimal("20")

    def applies_to(self, nights: int) -> bool:
        return self.enabled and self.percentage > 0 and nights >= self.min_nights


@dataclass
class SiteSettings:
    long_stay_discount: LongStayDiscount = field(default_factory=LongStayDiscount)


class SettingsProvider(Protocol):
    def get_settings(self) -> SiteSettings: ...
