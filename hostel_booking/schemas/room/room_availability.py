"""
Room availability schemas.

Provides schemas for the per-hostel availability listing and for the
verdict of the final check made right before a booking is submitted.

A snapshot is only a point-in-time read: nothing locks the room between
the check and the create call.
"""

from __future__ import annotations

from datetime import date as Date, datetime
from typing import List, Optional

from pydantic import Field, computed_field, field_validator

from hostel_booking.schemas.common.base import BaseResponseSchema, coerce_date
from hostel_booking.schemas.common.enums import AvailabilityVerdict, RoomStatus
from hostel_booking.schemas.room.room import RoomTypeInfo

__all__ = [
    "AvailabilityRoom",
    "RoomAvailabilityResponse",
    "RoomAvailabilityCheck",
]


class AvailabilityRoom(BaseResponseSchema):
    """
    Room state as reported for a date range.
    """

    id: str = Field(..., description="Room ID")
    room_number: Optional[str] = Field(default=None, description="Room number")
    floor: Optional[int] = Field(default=None, description="Floor")
    status: RoomStatus = Field(..., description="Current room status")
    current_occupancy: int = Field(..., ge=0, description="Occupied beds")
    max_occupancy: int = Field(..., ge=0, description="Total beds")
    room_type: Optional[RoomTypeInfo] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_full(self) -> bool:
        return self.current_occupancy >= self.max_occupancy

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_bookable(self) -> bool:
        """Room accepts a new booking: open status and a free bed."""
        return self.status == RoomStatus.AVAILABLE and not self.is_full


class RoomAvailabilityResponse(BaseResponseSchema):
    """
    Availability listing for a hostel and date range.
    """

    check_in_date: Optional[Date] = None
    check_out_date: Optional[Date] = None
    total_rooms: int = Field(default=0, ge=0)
    available_rooms: int = Field(default=0, ge=0)
    booked_rooms: int = Field(default=0, ge=0)
    rooms: List[AvailabilityRoom] = Field(default_factory=list)

    @field_validator("check_in_date", "check_out_date", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        return coerce_date(v)

    def find_room(self, room_id: str) -> Optional[AvailabilityRoom]:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None


class RoomAvailabilityCheck(BaseResponseSchema):
    """
    Result of the final availability check for one room.

    ``checked_at`` is recorded for debugging only.
    """

    verdict: AvailabilityVerdict
    room_id: str
    current_occupancy: int = 0
    max_occupancy: int = 0
    status: Optional[RoomStatus] = None
    checked_at: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def available(self) -> bool:
        return self.verdict == AvailabilityVerdict.AVAILABLE
