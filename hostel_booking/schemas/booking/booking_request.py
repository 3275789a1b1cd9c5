"""
Booking request schemas for initiating bookings.

This module defines the body of the create-with-deposit call and the
smaller update/cancel/extend payloads.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import EmailStr, Field, field_validator, model_validator

from hostel_booking.schemas.common.base import BaseRequestSchema, Money
from hostel_booking.schemas.common.enums import BookingType

__all__ = [
    "EmergencyContact",
    "CreateBookingWithDepositRequest",
    "UpdateBookingRequest",
    "CancelBookingRequest",
    "ExtendBookingRequest",
]


class EmergencyContact(BaseRequestSchema):
    """Person to contact on the student's behalf."""

    name: str = Field(..., min_length=2, max_length=255)
    relationship: str = Field(..., min_length=1, max_length=50)
    phone: str = Field(..., min_length=7, max_length=20)
    email: Optional[EmailStr] = None

    @field_validator("phone")
    @classmethod
    def validate_phone_number(cls, v: str) -> str:
        """Validate and normalize phone number."""
        # Remove common formatting characters
        v = v.replace(" ", "").replace("-", "").replace("(", "").replace(")", "")
        if not v.lstrip("+").isdigit():
            raise ValueError("Phone number must contain only digits")
        return v


class CreateBookingWithDepositRequest(BaseRequestSchema):
    """
    Complete booking request paid from the deposit balance.

    Built once per submission attempt; instances are immutable.
    """

    hostel_id: str = Field(..., min_length=1, description="Hostel to book")
    room_id: str = Field(..., min_length=1, description="Room to book")

    # Student identity
    student_id: str = Field(..., min_length=1)
    student_name: str = Field(..., min_length=2, max_length=255)
    student_email: EmailStr
    student_phone: str = Field(..., min_length=7, max_length=20)

    # Stay
    check_in_date: Date
    check_out_date: Date
    booking_type: BookingType

    emergency_contacts: Tuple[EmergencyContact, ...] = ()
    special_requests: Optional[str] = Field(default=None, max_length=1000)

    # Payment intent
    use_deposit_balance: bool = True
    deposit_amount: Money = Field(default=Decimal("0"), ge=0)

    @field_validator("emergency_contacts", mode="before")
    @classmethod
    def default_contacts(cls, v):
        return v if v is not None else ()

    @model_validator(mode="after")
    def validate_stay_dates(self) -> "CreateBookingWithDepositRequest":
        if self.check_out_date <= self.check_in_date:
            raise ValueError("Check-out date must be after check-in date")
        return self


class UpdateBookingRequest(BaseRequestSchema):
    """Partial booking update; only set fields are sent."""

    check_in_date: Optional[Date] = None
    check_out_date: Optional[Date] = None
    booking_type: Optional[BookingType] = None
    special_requests: Optional[str] = Field(default=None, max_length=1000)
    emergency_contacts: Optional[List[EmergencyContact]] = None


class CancelBookingRequest(BaseRequestSchema):
    reason: str = Field(..., min_length=1, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=1000)


class ExtendBookingRequest(BaseRequestSchema):
    new_check_out_date: Date
    reason: Optional[str] = Field(default=None, max_length=500)
