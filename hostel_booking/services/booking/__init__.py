"""
Booking service layer.

Provides business logic for:
- Booking submission paid from the deposit balance
- Booking lookups, updates, cancellation and extension
- Pricing and booking rule checks
- Mapping backend booking rejections to client exceptions
- The end-to-end reservation flow (balance -> availability -> submission)
"""

from hostel_booking.services.booking.booking_error_mapper import map_booking_error
from hostel_booking.services.booking.booking_pricing_service import (
    calculate_booking_price,
    calculate_payment_requirement,
    get_duration_in_days,
    validate_booking_constraints,
    validate_booking_dates,
)
from hostel_booking.services.booking.booking_service import BookingService
from hostel_booking.services.booking.reservation_service import ReservationService

__all__ = [
    "BookingService",
    "ReservationService",
    "calculate_booking_price",
    "calculate_payment_requirement",
    "get_duration_in_days",
    "map_booking_error",
    "validate_booking_constraints",
    "validate_booking_dates",
]
