"""
Booking response schemas.

This module defines the server-owned booking record and the derived
views the client computes from it. Status transitions only happen on the
server and are seen after a re-fetch.
"""

from __future__ import annotations

from datetime import date as Date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator

from hostel_booking.schemas.common.base import BaseResponseSchema, coerce_date
from hostel_booking.schemas.common.enums import BookingStatus, BookingType, PaymentStatus
from hostel_booking.schemas.room.room import RoomTypeInfo

__all__ = [
    "PaymentRequirement",
    "BookingHostel",
    "BookingRoom",
    "BookingEmergencyContact",
    "BookingRecord",
    "BookingPayment",
    "ActiveBookingStatus",
]


class PaymentRequirement(BaseResponseSchema):
    """Minimum payment needed to keep a booking from being auto-cancelled."""

    minimum_required: Decimal
    meets_requirement: bool
    days_until_auto_cancel: int = Field(..., ge=0)
    requirement_description: str


class BookingHostel(BaseResponseSchema):
    id: str
    name: str
    address: Optional[str] = None


class BookingRoom(BaseResponseSchema):
    id: str
    room_number: str
    floor: Optional[int] = None
    room_type: Optional[RoomTypeInfo] = None


class BookingEmergencyContact(BaseResponseSchema):
    name: str
    relationship: str
    phone: str
    email: Optional[str] = None


class BookingRecord(BaseResponseSchema):
    """
    Booking as returned by the backend.

    Financial fields are server-computed; the client never edits them.
    """

    id: str
    hostel_id: Optional[str] = None
    room_id: Optional[str] = None
    student_id: Optional[str] = None
    student_name: Optional[str] = None
    student_email: Optional[str] = None
    student_phone: Optional[str] = None
    booking_type: Optional[BookingType] = None
    status: BookingStatus
    payment_status: PaymentStatus = PaymentStatus.PENDING

    check_in_date: Optional[Date] = None
    check_out_date: Optional[Date] = None

    total_amount: Decimal = Field(default=Decimal("0"))
    amount_paid: Decimal = Field(default=Decimal("0"))
    amount_due: Decimal = Field(default=Decimal("0"))
    payment_due_date: Optional[datetime] = None

    special_requests: Optional[str] = None
    notes: Optional[str] = None
    cancellation_reason: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    checked_in_at: Optional[datetime] = None
    checked_out_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    auto_cancel_at: Optional[datetime] = None

    payment_requirements: Optional[PaymentRequirement] = None
    emergency_contacts: List[BookingEmergencyContact] = Field(default_factory=list)
    hostel: Optional[BookingHostel] = None
    room: Optional[BookingRoom] = None

    @field_validator("check_in_date", "check_out_date", mode="before")
    @classmethod
    def normalize_dates(cls, v):
        return coerce_date(v)

    @property
    def is_active(self) -> bool:
        return self.status in BookingStatus.active_statuses()


class BookingPayment(BaseResponseSchema):
    """Payment recorded against a booking."""

    id: str
    booking_id: str
    amount: Decimal
    payment_method: str
    payment_type: Optional[str] = None
    transaction_ref: Optional[str] = None
    notes: Optional[str] = None
    payment_date: Optional[datetime] = None
    received_by: Optional[str] = None
    created_at: Optional[datetime] = None


class ActiveBookingStatus(BaseResponseSchema):
    has_active: bool
    active_booking: Optional[BookingRecord] = None
