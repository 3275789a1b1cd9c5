"""
Translation of backend booking rejections into client exceptions.

The backend is expected to send a structured ``code`` with its errors.
Older deployments only send human-readable messages, so the known
phrases are matched as a fallback.
"""

from typing import Dict, Optional, Tuple, Type

from hostel_booking.core.exceptions import (
    APIError,
    BaseAppException,
    BookingConflictError,
    DuplicateActiveBookingError,
    GenderRestrictionError,
    ReservationError,
)

DUPLICATE_BOOKING_MESSAGE = (
    "You already have an active booking. Please complete or cancel your current "
    "booking before creating a new one."
)
GENDER_RESTRICTION_MESSAGE = "This room is restricted to students of a different gender."
BOOKING_CONFLICT_MESSAGE = "This room was just booked by another user. Please select a different room."

BACKEND_CODES: Dict[str, Type[ReservationError]] = {
    "DUPLICATE_ACTIVE_BOOKING": DuplicateActiveBookingError,
    "GENDER_RESTRICTED": GenderRestrictionError,
    "ROOM_UNAVAILABLE": BookingConflictError,
    "ROOM_FULL": BookingConflictError,
    "BOOKING_CONFLICT": BookingConflictError,
}

# Checked in order; first match wins
MESSAGE_PATTERNS: Tuple[Tuple[Tuple[str, ...], Type[ReservationError]], ...] = (
    (("already have an active booking",), DuplicateActiveBookingError),
    (("gender",), GenderRestrictionError),
    (
        (
            "no longer available",
            "fully booked",
            "room is not available",
            "room is already booked",
        ),
        BookingConflictError,
    ),
)


def _match_exception_class(error: APIError) -> Optional[Type[ReservationError]]:
    if error.backend_code:
        mapped = BACKEND_CODES.get(error.backend_code.upper())
        if mapped is not None:
            return mapped

    message = error.message.lower()
    for phrases, exception_class in MESSAGE_PATTERNS:
        if any(phrase in message for phrase in phrases):
            return exception_class
    return None


def map_booking_error(error: APIError) -> BaseAppException:
    """
    Friendlier exception for a failed create-booking call.

    Unrecognised errors are returned unchanged.
    """
    exception_class = _match_exception_class(error)

    if exception_class is DuplicateActiveBookingError:
        return DuplicateActiveBookingError(DUPLICATE_BOOKING_MESSAGE, status_code=error.status_code)
    if exception_class is GenderRestrictionError:
        # The backend message names the allowed genders; keep it.
        return GenderRestrictionError(error.message or GENDER_RESTRICTION_MESSAGE, status_code=error.status_code)
    if exception_class is BookingConflictError:
        return BookingConflictError(BOOKING_CONFLICT_MESSAGE, status_code=error.status_code)
    return error
