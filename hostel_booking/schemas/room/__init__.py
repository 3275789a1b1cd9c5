"""
Room schemas package.

Provides the room catalogue models and the availability snapshot models
used right before a booking is submitted.
"""

from hostel_booking.schemas.room.room import (
    Pagination,
    Room,
    RoomFilters,
    RoomStatistics,
    RoomsPage,
    RoomTypeInfo,
)
from hostel_booking.schemas.room.room_availability import (
    AvailabilityRoom,
    RoomAvailabilityCheck,
    RoomAvailabilityResponse,
)

__all__ = [
    # Catalogue
    "Pagination",
    "Room",
    "RoomFilters",
    "RoomStatistics",
    "RoomsPage",
    "RoomTypeInfo",
    # Availability
    "AvailabilityRoom",
    "RoomAvailabilityCheck",
    "RoomAvailabilityResponse",
]
