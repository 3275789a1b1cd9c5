"""
Custom Exceptions for the Hostel Booking Client

This module defines the exception classes raised by the API client and
the booking services. Every exception carries an ``ErrorCode`` so callers
can branch on the category instead of on message text.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from hostel_booking.schemas.common.enums import AvailabilityVerdict, ReservationStage


class ErrorCode(str, Enum):
    """Standard error codes for the client"""
    # Transport errors
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"

    # Client-side validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"

    # Reservation errors
    INSUFFICIENT_DEPOSIT = "INSUFFICIENT_DEPOSIT"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    ROOM_FULL = "ROOM_FULL"
    ROOM_UNAVAILABLE = "ROOM_UNAVAILABLE"
    DUPLICATE_ACTIVE_BOOKING = "DUPLICATE_ACTIVE_BOOKING"
    GENDER_RESTRICTED = "GENDER_RESTRICTED"
    BOOKING_CONFLICT = "BOOKING_CONFLICT"
    RESERVATION_IN_PROGRESS = "RESERVATION_IN_PROGRESS"


class BaseAppException(Exception):
    """
    Base exception class for all client exceptions.

    Provides consistent error handling across the package with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.API_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Transport Exceptions
# ========================================

class APIError(BaseAppException):
    """Exception raised when the backend answers with a non-2xx status"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        backend_code: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
        error_code: ErrorCode = ErrorCode.API_ERROR
    ):
        details = {"backend_code": backend_code} if backend_code else {}
        super().__init__(message, error_code, details, status_code)
        self.backend_code = backend_code
        self.payload = payload or {}

    def with_prefix(self, prefix: str) -> "APIError":
        """Copy of this error with context prepended to the message"""
        return APIError(
            f"{prefix}: {self.message}",
            status_code=self.status_code,
            backend_code=self.backend_code,
            payload=self.payload,
            error_code=self.error_code,
        )


class NetworkError(BaseAppException):
    """Exception raised when the backend cannot be reached"""

    def __init__(
        self,
        message: str = "Network error: Unable to connect to server. Please check your connection.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, ErrorCode.NETWORK_ERROR, details)


class RequestTimeoutError(BaseAppException):
    """Exception raised when a request or reservation attempt exceeds its deadline"""

    def __init__(
        self,
        message: str = "The server took too long to respond. Please try again.",
        timeout_seconds: Optional[float] = None
    ):
        details = {"timeout_seconds": timeout_seconds} if timeout_seconds is not None else {}
        super().__init__(message, ErrorCode.TIMEOUT_ERROR, details)


class InvalidResponseError(BaseAppException):
    """Exception raised when a response body cannot be parsed or validated"""

    def __init__(self, message: str = "Received an invalid response from the server", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_RESPONSE, details)


# ========================================
# Validation Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when client-side data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


# ========================================
# Reservation Exceptions
# ========================================

class ReservationError(BaseAppException):
    """Base exception for an aborted reservation attempt"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        stage: ReservationStage,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None
    ):
        details = dict(details or {})
        details["stage"] = stage.value
        super().__init__(message, error_code, details, status_code)
        self.stage = stage


class InsufficientDepositError(ReservationError):
    """Available deposit balance does not cover the booking fee"""

    def __init__(self, message: str, available_balance: Any, required_amount: Any):
        super().__init__(
            message,
            ErrorCode.INSUFFICIENT_DEPOSIT,
            ReservationStage.BALANCE_CHECK,
            details={
                "available_balance": str(available_balance),
                "required_amount": str(required_amount),
            },
        )
        self.available_balance = available_balance
        self.required_amount = required_amount


class RoomUnavailableError(ReservationError):
    """Room failed the final availability check"""

    _codes = {
        AvailabilityVerdict.NOT_FOUND: ErrorCode.ROOM_NOT_FOUND,
        AvailabilityVerdict.FULL: ErrorCode.ROOM_FULL,
    }

    def __init__(self, message: str, verdict: AvailabilityVerdict, room_id: str):
        super().__init__(
            message,
            self._codes.get(verdict, ErrorCode.ROOM_UNAVAILABLE),
            ReservationStage.AVAILABILITY_CHECK,
            details={"verdict": verdict.value, "room_id": room_id},
        )
        self.verdict = verdict
        self.room_id = room_id


class DuplicateActiveBookingError(ReservationError):
    """Student already holds an active booking"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, ErrorCode.DUPLICATE_ACTIVE_BOOKING, ReservationStage.SUBMISSION, status_code=status_code)


class GenderRestrictionError(ReservationError):
    """Room's gender restriction rejects the student"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, ErrorCode.GENDER_RESTRICTED, ReservationStage.SUBMISSION, status_code=status_code)


class BookingConflictError(ReservationError):
    """Room was taken by a competing booking after the availability check"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, ErrorCode.BOOKING_CONFLICT, ReservationStage.SUBMISSION, status_code=status_code)


class ReservationInProgressError(ReservationError):
    """A reservation attempt is already running for this session"""

    def __init__(self, message: str = "A booking is already being processed. Please wait for it to finish."):
        super().__init__(message, ErrorCode.RESERVATION_IN_PROGRESS, ReservationStage.BALANCE_CHECK)
