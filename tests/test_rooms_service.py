"""
Tests for the room catalogue service and its room utilities.
"""

import json

import pytest

from hostel_booking.schemas.common.enums import RoomStatus
from hostel_booking.schemas.room import Room, RoomFilters
from hostel_booking.services.room import RoomsService

from tests.factories import HOSTEL_ID, room_payload


@pytest.fixture
def rooms_service(api_client, test_settings):
    return RoomsService(api_client, test_settings)


def make_room(room_id, status="available", current=0, maximum=2, floor=1, room_type=None, number=None):
    extra = {"floor": floor, "roomType": room_type}
    if number is not None:
        extra["roomNumber"] = number
    return Room.model_validate(room_payload(room_id, status, current, maximum, **extra))


def room_type(name):
    return {"id": f"rt-{name.lower()}", "name": name, "pricePerSemester": 2400, "pricePerMonth": 600}


class TestRoomQueries:
    @pytest.mark.asyncio
    async def test_get_rooms_sends_only_set_filters(self, rooms_service, backend):
        backend.add("GET", "/api/rooms", {
            "rooms": [room_payload("room-1")],
            "pagination": {"page": 1, "limit": 10, "total": 1, "totalPages": 1},
        })

        page = await rooms_service.get_rooms(
            RoomFilters(hostel_id=HOSTEL_ID, status=RoomStatus.AVAILABLE, available_only=True, limit=10)
        )

        assert page.pagination.total_pages == 1
        assert page.rooms[0].id == "room-1"
        params = dict(backend.last_request("GET", "/api/rooms").url.params)
        assert params == {"hostelId": HOSTEL_ID, "status": "available", "availableOnly": "true", "limit": "10"}

    @pytest.mark.asyncio
    async def test_get_rooms_by_hostel(self, rooms_service, backend):
        backend.add("GET", f"/api/rooms/hostel/{HOSTEL_ID}", [room_payload("room-1"), room_payload("room-2")])

        rooms = await rooms_service.get_rooms_by_hostel(HOSTEL_ID)

        assert [room.id for room in rooms] == ["room-1", "room-2"]

    @pytest.mark.asyncio
    async def test_search_rooms_merges_term_and_filters(self, rooms_service, backend):
        backend.add("GET", "/api/rooms/search", [])

        await rooms_service.search_rooms("10", RoomFilters(floor=2))

        params = backend.last_request("GET", "/api/rooms/search").url.params
        assert params["searchTerm"] == "10"
        assert params["floor"] == "2"

    @pytest.mark.asyncio
    async def test_room_types_by_hostel(self, rooms_service, backend):
        backend.add("GET", f"/api/hostels/{HOSTEL_ID}/room-types", [
            {**room_type("Double"), "allowedGenders": ["female"]},
        ])

        types = await rooms_service.get_room_types_by_hostel(HOSTEL_ID)

        assert types[0].name == "Double"
        assert types[0].allowed_genders == ["female"]

    @pytest.mark.asyncio
    async def test_floors_and_room_numbers(self, rooms_service, backend):
        backend.add("GET", f"/api/rooms/hostel/{HOSTEL_ID}/floors", [1, 2, "3"])
        backend.add("GET", f"/api/rooms/hostel/{HOSTEL_ID}/room-numbers", [101, "102A"])

        assert await rooms_service.get_hostel_floors(HOSTEL_ID) == [1, 2, 3]
        assert await rooms_service.get_hostel_room_numbers(HOSTEL_ID) == ["101", "102A"]

    @pytest.mark.asyncio
    async def test_statistics(self, rooms_service, backend):
        backend.add("GET", f"/api/rooms/statistics/{HOSTEL_ID}", {
            "total": 10, "available": 4, "occupied": 5, "maintenance": 1, "reserved": 0,
            "occupancyRate": 62.5, "averageOccupancy": 1.25,
        })

        stats = await rooms_service.get_room_statistics(HOSTEL_ID)

        assert stats.total == 10
        assert stats.occupancy_rate == 62.5


class TestRoomUpdates:
    @pytest.mark.asyncio
    async def test_negative_occupancy_rejected_before_request(self, rooms_service, backend):
        with pytest.raises(ValueError):
            await rooms_service.update_room_occupancy("room-1", -1)

        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_change_room_status(self, rooms_service, backend):
        backend.add("PATCH", "/api/rooms/room-1/status", room_payload("room-1", "maintenance"))

        room = await rooms_service.change_room_status("room-1", RoomStatus.MAINTENANCE)

        assert room.status == RoomStatus.MAINTENANCE
        sent = json.loads(backend.last_request("PATCH", "/api/rooms/room-1/status").content)
        assert sent == {"status": "maintenance"}


class TestRoomUtilities:
    def test_availability_and_capacity(self):
        open_room = make_room("room-1", current=1, maximum=2)
        full_room = make_room("room-2", current=2, maximum=2)
        closed_room = make_room("room-3", status="maintenance")

        assert RoomsService.is_room_available(open_room) is True
        assert RoomsService.is_room_available(full_room) is False
        assert RoomsService.is_room_available(closed_room) is False
        assert RoomsService.get_remaining_capacity(open_room) == 1
        assert RoomsService.get_room_occupancy_percentage(open_room) == 50.0
        assert RoomsService.filter_available_rooms([open_room, full_room, closed_room]) == [open_room]

    def test_zero_capacity_room(self):
        room = make_room("room-1", current=0, maximum=0)

        assert RoomsService.get_room_occupancy_percentage(room) == 0.0
        assert RoomsService.calculate_occupancy_rate([room]) == 0.0

    def test_sort_by_number_puts_numeric_first(self):
        rooms = [make_room(f"room-{n}", number=n) for n in ("B2", "10", "2", "A1")]

        sorted_numbers = [room.room_number for room in RoomsService.sort_rooms_by_number(rooms)]

        assert sorted_numbers == ["2", "10", "A1", "B2"]

    def test_sort_by_floor_puts_missing_floor_last(self):
        rooms = [make_room("room-1", floor=None), make_room("room-2", floor=3), make_room("room-3", floor=0)]

        assert [room.id for room in RoomsService.sort_rooms_by_floor(rooms)] == ["room-3", "room-2", "room-1"]

    def test_grouping(self):
        rooms = [
            make_room("room-1", floor=1, room_type=room_type("Single")),
            make_room("room-2", floor=None),
            make_room("room-3", floor=1, status="occupied", current=2),
        ]

        by_floor = RoomsService.group_rooms_by_floor(rooms)
        by_type = RoomsService.group_rooms_by_type(rooms)
        by_status = RoomsService.group_rooms_by_status(rooms)

        assert [room.id for room in by_floor[1]] == ["room-1", "room-3"]
        assert [room.id for room in by_floor["No Floor"]] == ["room-2"]
        assert set(by_type) == {"Single", "Unknown Type"}
        assert len(by_status[RoomStatus.OCCUPIED]) == 1
        assert by_status[RoomStatus.RESERVED] == []

    def test_occupancy_statistics(self):
        rooms = [make_room("room-1", current=1, maximum=2), make_room("room-2", current=2, maximum=2)]

        assert RoomsService.calculate_occupancy_rate(rooms) == 75.0
        assert RoomsService.calculate_average_occupancy(rooms) == 1.5
        assert RoomsService.calculate_average_occupancy([]) == 0.0
        assert RoomsService.get_room_distribution(rooms)[RoomStatus.AVAILABLE] == 2
