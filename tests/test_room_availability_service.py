"""
Tests for the room availability service and the final availability check.
"""

from datetime import date

import httpx
import pytest

from hostel_booking.core.exceptions import APIError, NetworkError
from hostel_booking.schemas.common.enums import AvailabilityVerdict, RoomStatus
from hostel_booking.schemas.room import AvailabilityRoom
from hostel_booking.services.room import RoomAvailabilityService
from hostel_booking.services.room.room_availability_service import classify_room

from tests.factories import HOSTEL_ID, ROOM_ID, availability_payload, room_payload

AVAILABILITY_PATH = f"/api/bookings/hostel/{HOSTEL_ID}/availability"
CHECK_IN = date(2030, 1, 10)
CHECK_OUT = date(2030, 5, 10)


@pytest.fixture
def availability_service(api_client, test_settings):
    return RoomAvailabilityService(api_client, test_settings)


def make_room(status="available", current=1, maximum=2):
    return AvailabilityRoom.model_validate(room_payload(status=status, current=current, maximum=maximum))


class TestClassifyRoom:
    def test_missing_room_is_not_found(self):
        assert classify_room(None) == AvailabilityVerdict.NOT_FOUND

    @pytest.mark.parametrize("status", ["available", "occupied", "maintenance", "reserved"])
    def test_full_room_is_full_regardless_of_status(self, status):
        assert classify_room(make_room(status=status, current=2, maximum=2)) == AvailabilityVerdict.FULL

    def test_over_capacity_is_full(self):
        assert classify_room(make_room(current=3, maximum=2)) == AvailabilityVerdict.FULL

    @pytest.mark.parametrize("status", ["occupied", "maintenance", "reserved"])
    def test_closed_status_with_space_is_unavailable(self, status):
        assert classify_room(make_room(status=status, current=0, maximum=2)) == AvailabilityVerdict.UNAVAILABLE

    def test_open_room_with_space_is_available(self):
        assert classify_room(make_room(current=1, maximum=2)) == AvailabilityVerdict.AVAILABLE


class TestCheckRoomAvailability:
    @pytest.mark.asyncio
    async def test_sends_date_range_and_room_type(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload())

        await availability_service.check_room_availability(HOSTEL_ID, CHECK_IN, CHECK_OUT, room_type_id="rt-1")

        params = backend.last_request("GET", AVAILABILITY_PATH).url.params
        assert params["checkIn"] == "2030-01-10"
        assert params["checkOut"] == "2030-05-10"
        assert params["roomTypeId"] == "rt-1"

    @pytest.mark.asyncio
    async def test_room_type_omitted_when_not_given(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload())

        await availability_service.check_room_availability(HOSTEL_ID, "2030-01-10", "2030-05-10")

        assert "roomTypeId" not in backend.last_request("GET", AVAILABILITY_PATH).url.params

    @pytest.mark.asyncio
    async def test_only_bookable_rooms_kept(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload(
            room_payload("room-1", "available", 0, 2),
            room_payload("room-2", "available", 2, 2),
            room_payload("room-3", "maintenance", 0, 2),
            room_payload("room-4", "available", 3, 4),
        ))

        listing = await availability_service.check_room_availability(HOSTEL_ID, CHECK_IN, CHECK_OUT)

        assert [room.id for room in listing.rooms] == ["room-1", "room-4"]
        assert listing.available_rooms == 2
        assert listing.total_rooms == 4
        assert listing.check_in_date == CHECK_IN

    @pytest.mark.asyncio
    async def test_api_error_prefixed(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, {"message": "Hostel not found"}, status_code=404)

        with pytest.raises(APIError) as exc_info:
            await availability_service.check_room_availability(HOSTEL_ID, CHECK_IN, CHECK_OUT)

        assert exc_info.value.message == "Failed to check room availability: Hostel not found"
        assert exc_info.value.status_code == 404


class TestFinalAvailabilityCheck:
    @pytest.mark.asyncio
    async def test_available_room(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload(room_payload(ROOM_ID, "available", 1, 2)))

        check = await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)

        assert check.available is True
        assert check.verdict == AvailabilityVerdict.AVAILABLE
        assert check.current_occupancy == 1
        assert check.max_occupancy == 2
        assert check.status == RoomStatus.AVAILABLE
        assert check.checked_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_full_room(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload(room_payload(ROOM_ID, "available", 2, 2)))

        check = await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)

        assert check.available is False
        assert check.verdict == AvailabilityVerdict.FULL

    @pytest.mark.asyncio
    async def test_room_missing_from_listing(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload(room_payload("room-999")))

        check = await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)

        assert check.verdict == AvailabilityVerdict.NOT_FOUND
        assert check.room_id == ROOM_ID
        assert check.status is None

    @pytest.mark.asyncio
    async def test_repeated_checks_agree(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, availability_payload(room_payload(ROOM_ID, "reserved", 0, 2)))

        first = await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)
        second = await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)

        assert first.verdict == second.verdict == AvailabilityVerdict.UNAVAILABLE
        assert backend.count("GET", AVAILABILITY_PATH) == 2

    @pytest.mark.asyncio
    async def test_api_error_prefixed(self, availability_service, backend):
        backend.add("GET", AVAILABILITY_PATH, {"message": "Invalid date range"}, status_code=400)

        with pytest.raises(APIError) as exc_info:
            await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)

        assert exc_info.value.message == "Failed to verify room availability: Invalid date range"

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, availability_service, backend):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        backend.add_handler("GET", AVAILABILITY_PATH, refuse)

        with pytest.raises(NetworkError):
            await availability_service.perform_final_availability_check(HOSTEL_ID, ROOM_ID, CHECK_IN, CHECK_OUT)
