from decimal import Decimal
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field
from farmstay.models.rooms import Room


class RoomRequest(BaseModel):
    room_id: Optional[str] = None
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    base_price: Decimal = Field(gt=0)
    capacity: int = Field(default=1, gt=0)
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)

    def to_room(self) -> Room:
        return Room(
            room_id=self.room_id or str(uuid4()),
            name=self.name,
            description=self.description,
            base_price=self.base_price,
            capacity=self.capacity,
            amenities=self.amenities,
            images=self.images,
        )
