"""
Booking schemas package.

Provides the request bodies sent to the booking endpoints and the
booking record returned by them.
"""

from hostel_booking.schemas.booking.booking_request import (
    CancelBookingRequest,
    CreateBookingWithDepositRequest,
    EmergencyContact,
    ExtendBookingRequest,
    UpdateBookingRequest,
)
from hostel_booking.schemas.booking.booking_response import (
    ActiveBookingStatus,
    BookingEmergencyContact,
    BookingHostel,
    BookingPayment,
    BookingRecord,
    BookingRoom,
    PaymentRequirement,
)

__all__ = [
    # Requests
    "CancelBookingRequest",
    "CreateBookingWithDepositRequest",
    "EmergencyContact",
    "ExtendBookingRequest",
    "UpdateBookingRequest",
    # Responses
    "ActiveBookingStatus",
    "BookingEmergencyContact",
    "BookingHostel",
    "BookingPayment",
    "BookingRecord",
    "BookingRoom",
    "PaymentRequirement",
]
