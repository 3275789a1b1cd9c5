"""
Room availability service.

Reads the per-hostel availability listing for a date range. The final
check classifies one room right before a booking is submitted; it narrows
the window in which a competing booking can take the room but does not
close it, since nothing is locked between the check and the create call.
"""

from datetime import date as Date, datetime, timezone
from typing import Any, Dict, Optional, Union

from hostel_booking.core.exceptions import APIError, BaseAppException
from hostel_booking.schemas.common.enums import AvailabilityVerdict, RoomStatus
from hostel_booking.schemas.room import (
    AvailabilityRoom,
    RoomAvailabilityCheck,
    RoomAvailabilityResponse,
)
from hostel_booking.services.base import BaseService

DateLike = Union[Date, str]


def _iso(value: DateLike) -> str:
    return value.isoformat() if isinstance(value, Date) else value


def classify_room(room: Optional[AvailabilityRoom]) -> AvailabilityVerdict:
    """
    Verdict for a room looked up in an availability listing.

    Occupancy wins over status: a room at capacity is full whatever its
    status string says.
    """
    if room is None:
        return AvailabilityVerdict.NOT_FOUND
    if room.is_full:
        return AvailabilityVerdict.FULL
    if room.status != RoomStatus.AVAILABLE:
        return AvailabilityVerdict.UNAVAILABLE
    return AvailabilityVerdict.AVAILABLE


class RoomAvailabilityService(BaseService):
    """
    Availability lookups for booking flows.
    """

    async def _fetch_availability(
        self,
        hostel_id: str,
        check_in: DateLike,
        check_out: DateLike,
        room_type_id: Optional[str] = None,
    ) -> RoomAvailabilityResponse:
        params: Dict[str, Any] = {"checkIn": _iso(check_in), "checkOut": _iso(check_out)}
        if room_type_id:
            params["roomTypeId"] = room_type_id
        payload = await self.client.get(f"/bookings/hostel/{hostel_id}/availability", params=params)
        return self._parse(RoomAvailabilityResponse, payload, "read room availability")

    async def check_room_availability(
        self,
        hostel_id: str,
        check_in: DateLike,
        check_out: DateLike,
        room_type_id: Optional[str] = None,
    ) -> RoomAvailabilityResponse:
        """
        Availability listing reduced to rooms that can take a booking.

        ``available_rooms`` is recomputed from the filtered list.
        """
        try:
            listing = await self._fetch_availability(hostel_id, check_in, check_out, room_type_id)
        except APIError as e:
            raise e.with_prefix("Failed to check room availability") from e

        bookable = [room for room in listing.rooms if room.is_bookable]
        return listing.model_copy(update={"rooms": bookable, "available_rooms": len(bookable)})

    async def perform_final_availability_check(
        self,
        hostel_id: str,
        room_id: str,
        check_in: DateLike,
        check_out: DateLike,
    ) -> RoomAvailabilityCheck:
        """
        Re-read availability and classify a single room.

        Called immediately before submission even if availability was
        shown earlier, because the earlier read may be minutes old.
        """
        try:
            listing = await self._fetch_availability(hostel_id, check_in, check_out)
        except APIError as e:
            raise e.with_prefix("Failed to verify room availability") from e
        except BaseAppException as e:
            self._logger.error(
                f"Final availability check failed for room {room_id}: {e.message}",
                extra={"hostel_id": hostel_id, "room_id": room_id},
            )
            raise

        room = listing.find_room(room_id)
        verdict = classify_room(room)
        checked_at = datetime.now(timezone.utc)

        self._logger.info(
            f"Final availability check for room {room_id}: {verdict.value}",
            extra={
                "hostel_id": hostel_id,
                "room_id": room_id,
                "verdict": verdict.value,
                "checked_at": checked_at.isoformat(),
            },
        )

        if room is None:
            return RoomAvailabilityCheck(
                verdict=verdict,
                room_id=room_id,
                current_occupancy=0,
                max_occupancy=0,
                status=None,
                checked_at=checked_at,
            )

        return RoomAvailabilityCheck(
            verdict=verdict,
            room_id=room.id,
            current_occupancy=room.current_occupancy,
            max_occupancy=room.max_occupancy,
            status=room.status,
            checked_at=checked_at,
        )
