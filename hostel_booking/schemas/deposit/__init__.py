"""
Deposit schemas package.
"""

from hostel_booking.schemas.deposit.deposit import (
    ApplyDepositRequest,
    CreateDepositRequest,
    Deposit,
    DepositBalance,
    DepositBreakdown,
    DepositVerification,
    VerifyDepositRequest,
)

__all__ = [
    "ApplyDepositRequest",
    "CreateDepositRequest",
    "Deposit",
    "DepositBalance",
    "DepositBreakdown",
    "DepositVerification",
    "VerifyDepositRequest",
]
