"""
Deposit schemas.

A deposit is prepaid account credit a student tops up through the payment
gateway and later applies toward the booking fee.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from hostel_booking.schemas.common.base import BaseRequestSchema, BaseResponseSchema, Money
from hostel_booking.schemas.common.enums import DepositStatus, DepositType

__all__ = [
    "DepositBreakdown",
    "DepositBalance",
    "Deposit",
    "CreateDepositRequest",
    "VerifyDepositRequest",
    "DepositVerification",
    "ApplyDepositRequest",
]


class DepositBreakdown(BaseResponseSchema):
    """Deposit totals grouped by status."""

    completed: Decimal = Field(default=Decimal("0"))
    pending: Decimal = Field(default=Decimal("0"))
    failed: Decimal = Field(default=Decimal("0"))


class DepositBalance(BaseResponseSchema):
    """
    User's prepaid balance.

    ``available_balance`` is what can be spent now; ``total_balance``
    includes funds already earmarked. Always fetched fresh, never cached.
    """

    total_balance: Decimal = Field(..., description="All completed deposit funds")
    available_balance: Decimal = Field(..., description="Funds that can be applied now")
    pending_deposits: Decimal = Field(default=Decimal("0"), description="Deposits awaiting verification")
    deposit_breakdown: Optional[DepositBreakdown] = None

    def covers(self, amount: Decimal) -> bool:
        return self.available_balance >= amount


class Deposit(BaseResponseSchema):
    """Single deposit record."""

    id: str
    user_id: str
    amount: Decimal
    status: DepositStatus
    deposit_type: DepositType
    payment_reference: str
    paystack_reference: Optional[str] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    payment_date: Optional[datetime] = None
    verified_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateDepositRequest(BaseRequestSchema):
    amount: Money = Field(..., gt=0)
    payment_reference: str = Field(..., min_length=1)
    notes: Optional[str] = Field(default=None, max_length=500)


class VerifyDepositRequest(BaseRequestSchema):
    reference: str = Field(..., min_length=1)
    expected_amount: Money = Field(..., gt=0)


class DepositVerification(BaseResponseSchema):
    deposit: Deposit
    verified: bool


class ApplyDepositRequest(BaseRequestSchema):
    booking_id: str = Field(..., min_length=1)
    amount: Money = Field(..., gt=0)
