"""
Room catalogue service: listings, lookups, and room utilities.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Union

from hostel_booking.schemas.common.enums import RoomStatus
from hostel_booking.schemas.room import (
    Room,
    RoomFilters,
    RoomsPage,
    RoomStatistics,
    RoomTypeInfo,
)
from hostel_booking.services.base import BaseService

NO_FLOOR = "No Floor"
UNKNOWN_TYPE = "Unknown Type"


class RoomsService(BaseService):
    """
    Room catalogue operations.

    The HTTP methods mirror the backend's /rooms endpoints; the static
    helpers work on already-fetched rooms.
    """

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    async def get_rooms(self, filters: Optional[RoomFilters] = None) -> RoomsPage:
        params = (filters or RoomFilters()).to_params()
        payload = await self.client.get("/rooms", params=params)
        return self._parse(RoomsPage, payload, "list rooms")

    async def get_room_by_id(self, room_id: str) -> Room:
        payload = await self.client.get(f"/rooms/{room_id}")
        return self._parse(Room, payload, "fetch room")

    async def get_rooms_by_hostel(self, hostel_id: str, filters: Optional[RoomFilters] = None) -> List[Room]:
        params = (filters or RoomFilters()).to_params()
        payload = await self.client.get(f"/rooms/hostel/{hostel_id}", params=params)
        return self._parse_list(Room, payload, "list hostel rooms")

    async def get_available_rooms(self, hostel_id: str, room_type_id: Optional[str] = None) -> List[Room]:
        params = {"roomTypeId": room_type_id} if room_type_id else None
        payload = await self.client.get(f"/rooms/available/{hostel_id}", params=params)
        return self._parse_list(Room, payload, "list available rooms")

    async def get_room_statistics(self, hostel_id: str) -> RoomStatistics:
        payload = await self.client.get(f"/rooms/statistics/{hostel_id}")
        return self._parse(RoomStatistics, payload, "fetch room statistics")

    async def search_rooms(self, search_term: str, filters: Optional[RoomFilters] = None) -> List[Room]:
        params = {"searchTerm": search_term}
        params.update((filters or RoomFilters()).to_params())
        payload = await self.client.get("/rooms/search", params=params)
        return self._parse_list(Room, payload, "search rooms")

    async def get_room_types_by_hostel(self, hostel_id: str) -> List[RoomTypeInfo]:
        payload = await self.client.get(f"/hostels/{hostel_id}/room-types")
        return self._parse_list(RoomTypeInfo, payload, "list room types")

    async def get_room_type_by_id(self, hostel_id: str, room_type_id: str) -> RoomTypeInfo:
        payload = await self.client.get(f"/hostels/{hostel_id}/room-types/{room_type_id}")
        return self._parse(RoomTypeInfo, payload, "fetch room type")

    async def get_hostel_floors(self, hostel_id: str) -> List[int]:
        payload = await self.client.get(f"/rooms/hostel/{hostel_id}/floors")
        return [int(floor) for floor in payload or []]

    async def get_hostel_room_numbers(self, hostel_id: str) -> List[str]:
        payload = await self.client.get(f"/rooms/hostel/{hostel_id}/room-numbers")
        return [str(number) for number in payload or []]

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    async def update_room_occupancy(self, room_id: str, occupancy: int) -> Room:
        if occupancy < 0:
            raise ValueError("Occupancy cannot be negative")
        payload = await self.client.patch(f"/rooms/{room_id}/occupancy", {"occupancy": occupancy})
        return self._parse(Room, payload, "update room occupancy")

    async def change_room_status(self, room_id: str, status: RoomStatus) -> Room:
        payload = await self.client.patch(f"/rooms/{room_id}/status", {"status": status.value})
        self._logger.info(
            f"Room {room_id} status changed to {status.value}",
            extra={"room_id": room_id, "status": status.value},
        )
        return self._parse(Room, payload, "change room status")

    # -------------------------------------------------------------------------
    # Room utilities
    # -------------------------------------------------------------------------

    @staticmethod
    def is_room_available(room: Room) -> bool:
        return room.status == RoomStatus.AVAILABLE and room.current_occupancy < room.max_occupancy

    @staticmethod
    def get_room_occupancy_percentage(room: Room) -> float:
        if room.max_occupancy <= 0:
            return 0.0
        return room.current_occupancy / room.max_occupancy * 100

    @staticmethod
    def get_remaining_capacity(room: Room) -> int:
        return max(0, room.max_occupancy - room.current_occupancy)

    @staticmethod
    def filter_rooms_by_status(rooms: List[Room], status: RoomStatus) -> List[Room]:
        return [room for room in rooms if room.status == status]

    @classmethod
    def filter_available_rooms(cls, rooms: List[Room]) -> List[Room]:
        return [room for room in rooms if cls.is_room_available(room)]

    @staticmethod
    def sort_rooms_by_number(rooms: List[Room]) -> List[Room]:
        """Numeric room numbers sort numerically, ahead of alphanumeric ones."""
        def key(room: Room):
            number = room.room_number.strip()
            if number.isdigit():
                return (0, int(number), number)
            return (1, 0, number)
        return sorted(rooms, key=key)

    @staticmethod
    def sort_rooms_by_floor(rooms: List[Room]) -> List[Room]:
        # Rooms without a floor go last
        return sorted(rooms, key=lambda room: (room.floor is None, room.floor or 0))

    @classmethod
    def sort_rooms_by_occupancy(cls, rooms: List[Room], ascending: bool = True) -> List[Room]:
        return sorted(rooms, key=cls.get_room_occupancy_percentage, reverse=not ascending)

    @staticmethod
    def group_rooms_by_floor(rooms: List[Room]) -> Dict[Union[int, str], List[Room]]:
        grouped: Dict[Union[int, str], List[Room]] = defaultdict(list)
        for room in rooms:
            grouped[room.floor if room.floor is not None else NO_FLOOR].append(room)
        return dict(grouped)

    @staticmethod
    def group_rooms_by_type(rooms: List[Room]) -> Dict[str, List[Room]]:
        grouped: Dict[str, List[Room]] = defaultdict(list)
        for room in rooms:
            grouped[room.room_type.name if room.room_type else UNKNOWN_TYPE].append(room)
        return dict(grouped)

    @staticmethod
    def group_rooms_by_status(rooms: List[Room]) -> Dict[RoomStatus, List[Room]]:
        grouped: Dict[RoomStatus, List[Room]] = {status: [] for status in RoomStatus}
        for room in rooms:
            grouped[room.status].append(room)
        return grouped

    @staticmethod
    def calculate_occupancy_rate(rooms: List[Room]) -> float:
        total_capacity = sum(room.max_occupancy for room in rooms)
        if total_capacity <= 0:
            return 0.0
        return sum(room.current_occupancy for room in rooms) / total_capacity * 100

    @staticmethod
    def calculate_average_occupancy(rooms: List[Room]) -> float:
        if not rooms:
            return 0.0
        return sum(room.current_occupancy for room in rooms) / len(rooms)

    @staticmethod
    def get_room_distribution(rooms: List[Room]) -> Dict[RoomStatus, int]:
        distribution = {status: 0 for status in RoomStatus}
        for room in rooms:
            distribution[room.status] += 1
        return distribution
