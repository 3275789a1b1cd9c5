"""
Room catalogue schemas.

Rooms belong to a hostel and to a room type, which carries the pricing
and gender restrictions.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import Field

from hostel_booking.schemas.common.base import BaseResponseSchema, BaseSchema
from hostel_booking.schemas.common.enums import RoomStatus, SortOrder

__all__ = [
    "RoomTypeInfo",
    "Room",
    "RoomFilters",
    "Pagination",
    "RoomsPage",
    "RoomStatistics",
]


class RoomTypeInfo(BaseResponseSchema):
    """Room type summary with pricing."""

    id: str
    name: str
    price_per_semester: Decimal = Field(default=Decimal("0"))
    price_per_month: Decimal = Field(default=Decimal("0"))
    price_per_week: Optional[Decimal] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    amenities: List[str] = Field(default_factory=list)
    allowed_genders: Optional[List[str]] = None


class Room(BaseResponseSchema):
    """Room as listed in the hostel catalogue."""

    id: str
    hostel_id: Optional[str] = None
    room_number: str
    floor: Optional[int] = None
    max_occupancy: int = Field(..., ge=0)
    current_occupancy: int = Field(default=0, ge=0)
    status: RoomStatus
    room_type: Optional[RoomTypeInfo] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RoomFilters(BaseSchema):
    """
    Query filters for room listings.

    Unset fields are left out of the query string entirely.
    """

    hostel_id: Optional[str] = None
    room_type_id: Optional[str] = None
    status: Optional[RoomStatus] = None
    floor: Optional[int] = None
    available_only: Optional[bool] = None
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1, le=100)
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None

    def to_params(self) -> Dict[str, Any]:
        params = {}
        for key, value in self.to_payload(exclude_none=True).items():
            if value == "":
                continue
            # Booleans go out the way the web portal sends them
            params[key] = str(value).lower() if isinstance(value, bool) else value
        return params


class Pagination(BaseResponseSchema):
    page: int
    limit: int
    total: int
    total_pages: int


class RoomsPage(BaseResponseSchema):
    rooms: List[Room]
    pagination: Pagination


class RoomStatistics(BaseResponseSchema):
    total: int = 0
    available: int = 0
    occupied: int = 0
    maintenance: int = 0
    reserved: int = 0
    occupancy_rate: float = 0.0
    average_occupancy: float = 0.0
