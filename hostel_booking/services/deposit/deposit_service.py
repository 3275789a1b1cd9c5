"""
Deposit service: prepaid balance lookups and deposit lifecycle calls.

The balance is always read fresh from the backend; it is never cached
between calls.
"""

from decimal import Decimal
from typing import List, Union

from hostel_booking.schemas.deposit import (
    ApplyDepositRequest,
    CreateDepositRequest,
    Deposit,
    DepositBalance,
    DepositVerification,
    VerifyDepositRequest,
)
from hostel_booking.services.base import BaseService
from hostel_booking.utils.formatters import format_price


class DepositService(BaseService):
    """
    Deposit operations for the authenticated student.

    Responsibilities:
    - Balance lookups used to gate bookings
    - Recording and verifying gateway deposits
    - Applying credit to an existing booking
    """

    async def get_deposit_balance(self) -> DepositBalance:
        payload = await self.client.get("/deposits/balance")
        balance = self._parse(DepositBalance, payload, "fetch deposit balance")
        self._logger.debug(
            "Deposit balance fetched",
            extra={
                "available_balance": str(balance.available_balance),
                "total_balance": str(balance.total_balance),
            },
        )
        return balance

    async def has_sufficient_balance(self, amount: Union[Decimal, int, float]) -> bool:
        balance = await self.get_deposit_balance()
        return balance.covers(Decimal(str(amount)))

    async def create_deposit(self, request: CreateDepositRequest) -> Deposit:
        payload = await self.client.post("/deposits", request.to_payload(exclude_none=True))
        deposit = self._parse(Deposit, payload, "create deposit")
        self._logger.info(
            f"Deposit {deposit.id} recorded",
            extra={"deposit_id": deposit.id, "amount": str(deposit.amount)},
        )
        return deposit

    async def verify_deposit(self, request: VerifyDepositRequest) -> DepositVerification:
        payload = await self.client.post("/deposits/verify", request.to_payload())
        result = self._parse(DepositVerification, payload, "verify deposit")
        if not result.verified:
            self._logger.warning(
                f"Deposit reference {request.reference} was not verified",
                extra={"reference": request.reference},
            )
        return result

    async def get_user_deposits(self) -> List[Deposit]:
        payload = await self.client.get("/deposits")
        return self._parse_list(Deposit, payload, "fetch deposits")

    async def apply_deposit_to_booking(self, booking_id: str, amount: Union[Decimal, int, float]) -> dict:
        request = ApplyDepositRequest(booking_id=booking_id, amount=Decimal(str(amount)))
        result = await self.client.post("/deposits/apply-to-booking", request.to_payload())
        self._logger.info(
            f"Applied {amount} of deposit credit to booking {booking_id}",
            extra={"booking_id": booking_id, "amount": str(amount)},
        )
        return result or {}

    def format_price(self, amount: Union[Decimal, int, float]) -> str:
        return format_price(amount, self.config.CURRENCY)
