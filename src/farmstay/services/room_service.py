from farmstay.repository.room_repo import RoomRepository
from farmstay.models.rooms import Room
from farmstay.utils.custom_exceptions import NotFoundException
from typing import List


class RoomService:
    def __init__(self, room_repo: RoomRepository):
        self.room_repo = room_repo

    def list_rooms(self) -> List[Room]:
        return sorted(self.room_repo.list_rooms(), key=lambda r: r.room_id)

    def get_room(self, room_id: str) -> Room:
        room = self.room_repo.get_room_by_id(room_id)
        if room is None:
            raise NotFoundException("room", room_id, 404)
        return room

    def save_room(self, room: Room):
        self.room_repo.save_room(room)

    def delete_room(self, room_id: str):
        self.room_repo.delete_room(room_id)
