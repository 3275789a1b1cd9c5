"""
All enumeration types used across the booking client.

Values mirror what the hostel backend sends and accepts on the wire.
"""

from enum import Enum

__all__ = [
    "RoomStatus",
    "BookingType",
    "BookingStatus",
    "PaymentStatus",
    "PaymentMethod",
    "DepositStatus",
    "DepositType",
    "AvailabilityVerdict",
    "ReservationStage",
    "SortOrder",
]


class RoomStatus(str, Enum):
    """Room status enumeration."""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"


class BookingType(str, Enum):
    """Booking period enumeration."""

    SEMESTER = "semester"
    MONTHLY = "monthly"
    WEEKLY = "weekly"


class BookingStatus(str, Enum):
    """Booking status enumeration."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked_in"
    CHECKED_OUT = "checked_out"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"

    @classmethod
    def active_statuses(cls) -> frozenset:
        """Statuses that count toward the one-active-booking-per-student policy."""
        return frozenset({cls.PENDING, cls.CONFIRMED, cls.CHECKED_IN})


class PaymentStatus(str, Enum):
    """Payment status enumeration."""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    REFUNDED = "refunded"
    OVERDUE = "overdue"


class PaymentMethod(str, Enum):
    """Payment method enumeration."""

    ACCOUNT_CREDIT = "ACCOUNT_CREDIT"
    CASH = "CASH"
    MOBILE_MONEY = "MOBILE_MONEY"
    BANK_TRANSFER = "BANK_TRANSFER"
    CARD = "CARD"
    CHEQUE = "CHEQUE"


class DepositStatus(str, Enum):
    """Deposit status enumeration."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


class DepositType(str, Enum):
    """Deposit purpose enumeration."""

    BOOKING_DEPOSIT = "booking_deposit"
    ROOM_BALANCE = "room_balance"
    ACCOUNT_CREDIT = "account_credit"


class AvailabilityVerdict(str, Enum):
    """Outcome of a final room availability check."""

    AVAILABLE = "available"
    FULL = "full"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


class ReservationStage(str, Enum):
    """Stages of a reservation attempt, in execution order."""

    BALANCE_CHECK = "balance_check"
    AVAILABILITY_CHECK = "availability_check"
    SUBMISSION = "submission"
    COMPLETED = "completed"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"
