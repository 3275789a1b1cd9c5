from hostel_booking.core.exceptions import (
    APIError,
    BaseAppException,
    BookingConflictError,
    DuplicateActiveBookingError,
    ErrorCode,
    GenderRestrictionError,
    InsufficientDepositError,
    InvalidResponseError,
    NetworkError,
    RequestTimeoutError,
    ReservationError,
    ReservationInProgressError,
    RoomUnavailableError,
    ValidationError,
)
from hostel_booking.core.session import AuthSession, default_session

__all__ = [
    "APIError",
    "AuthSession",
    "BaseAppException",
    "BookingConflictError",
    "DuplicateActiveBookingError",
    "ErrorCode",
    "GenderRestrictionError",
    "InsufficientDepositError",
    "InvalidResponseError",
    "NetworkError",
    "RequestTimeoutError",
    "ReservationError",
    "ReservationInProgressError",
    "RoomUnavailableError",
    "ValidationError",
    "default_session",
]
