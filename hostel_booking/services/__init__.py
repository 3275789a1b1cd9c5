"""
Service layer for the hostel booking client.

Each service wraps one area of the backend API:
- http: the shared JSON client
- deposit: prepaid balance and deposits
- room: room catalogue and availability
- booking: bookings and the reservation flow
"""

from hostel_booking.services.booking import BookingService, ReservationService
from hostel_booking.services.deposit import DepositService
from hostel_booking.services.http import ApiClient
from hostel_booking.services.room import RoomAvailabilityService, RoomsService

__all__ = [
    "ApiClient",
    "BookingService",
    "DepositService",
    "ReservationService",
    "RoomAvailabilityService",
    "RoomsService",
]
