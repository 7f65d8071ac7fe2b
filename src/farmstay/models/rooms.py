from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class Room:
    room_id: str
    name: str
    base_price: Decimal
    capacity: int = 1
    description: str = ""
    amenities: List[str] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
