"""
Room service layer.

Provides business logic for:
- Room catalogue queries and status/occupancy updates
- Availability listings and the final pre-booking availability check
"""

from hostel_booking.services.room.room_availability_service import (
    RoomAvailabilityService,
    classify_room,
)
from hostel_booking.services.room.rooms_service import RoomsService

__all__ = [
    "RoomAvailabilityService",
    "RoomsService",
    "classify_room",
]
