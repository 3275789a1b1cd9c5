from hostel_booking.schemas.common.base import (
    BaseRequestSchema,
    BaseResponseSchema,
    BaseSchema,
    Money,
    coerce_date,
)
from hostel_booking.schemas.common.enums import (
    AvailabilityVerdict,
    BookingStatus,
    BookingType,
    DepositStatus,
    DepositType,
    PaymentMethod,
    PaymentStatus,
    ReservationStage,
    RoomStatus,
    SortOrder,
)

__all__ = [
    "AvailabilityVerdict",
    "BaseRequestSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "Money",
    "BookingStatus",
    "BookingType",
    "DepositStatus",
    "DepositType",
    "PaymentMethod",
    "PaymentStatus",
    "ReservationStage",
    "RoomStatus",
    "SortOrder",
    "coerce_date",
]
