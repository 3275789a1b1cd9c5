"""
Deposit-paid reservation flow.

Runs one reservation attempt as a strictly linear sequence:

1. balance check    - abort with InsufficientDepositError when the available
                      deposit balance is below the booking fee
2. availability     - re-read the room and abort with RoomUnavailableError
   check              unless it is still bookable
3. submission       - create the booking; known backend rejections surface
                      as the matching ReservationError subclass
4. completed        - the created BookingRecord is returned

Every step is a network round trip and any failure ends the attempt.
Nothing is retried; a new attempt starts again from step 1 so that no
stale balance or availability read is reused. The availability check is
advisory only: the create call on the backend is what actually prevents
double booking.
"""

import asyncio
import logging
import time
from decimal import Decimal
from functools import wraps
from typing import Optional

from hostel_booking.config.settings import Settings, settings as default_settings
from hostel_booking.core.exceptions import (
    InsufficientDepositError,
    RequestTimeoutError,
    ReservationInProgressError,
    RoomUnavailableError,
)
from hostel_booking.schemas.booking import BookingRecord, CreateBookingWithDepositRequest
from hostel_booking.schemas.common.enums import AvailabilityVerdict, ReservationStage
from hostel_booking.schemas.deposit import DepositBalance
from hostel_booking.schemas.room import RoomAvailabilityCheck
from hostel_booking.services.booking.booking_service import BookingService
from hostel_booking.services.deposit import DepositService
from hostel_booking.services.http.api_client import ApiClient
from hostel_booking.services.room import RoomAvailabilityService
from hostel_booking.utils.formatters import format_price

logger = logging.getLogger(__name__)

ROOM_UNAVAILABLE_MESSAGES = {
    AvailabilityVerdict.NOT_FOUND: "This room is no longer available. Please select another room.",
    AvailabilityVerdict.FULL: "This room is now fully booked. Please select another room.",
    AvailabilityVerdict.UNAVAILABLE: "This room is not currently available for booking.",
}


def track_performance(operation_name: str):
    """Decorator to log the duration of an async operation."""
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
                duration = time.perf_counter() - start_time
                logger.info(
                    f"Operation '{operation_name}' completed in {duration:.3f}s",
                    extra={"operation": operation_name, "duration_seconds": duration, "success": True},
                )
                return result
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(
                    f"Operation '{operation_name}' failed after {duration:.3f}s: {str(e)}",
                    extra={"operation": operation_name, "duration_seconds": duration, "error": str(e)},
                )
                raise
        return wrapper
    return decorator


class ReservationService:
    """
    Coordinates balance check, final availability check and submission.

    One instance serves one user session. While an attempt is running a
    second call to ``reserve`` is refused, like the disabled submit button
    in the portal; separate sessions are not coordinated here.
    """

    def __init__(
        self,
        deposit_service: Optional[DepositService] = None,
        availability_service: Optional[RoomAvailabilityService] = None,
        booking_service: Optional[BookingService] = None,
        client: Optional[ApiClient] = None,
        config: Optional[Settings] = None,
    ):
        self.config = config or default_settings
        client = client or ApiClient(config=self.config)
        self.deposit_service = deposit_service or DepositService(client, self.config)
        self.availability_service = availability_service or RoomAvailabilityService(client, self.config)
        self.booking_service = booking_service or BookingService(client, self.config)
        self.booking_fee: Decimal = self.config.BOOKING_FEE
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    # -------------------------------------------------------------------------
    # Stages
    # -------------------------------------------------------------------------

    async def _check_balance(self) -> DepositBalance:
        balance = await self.deposit_service.get_deposit_balance()
        if not balance.covers(self.booking_fee):
            currency = self.config.CURRENCY
            raise InsufficientDepositError(
                f"Insufficient deposit balance. You have {format_price(balance.available_balance, currency)} "
                f"but need at least {format_price(self.booking_fee, currency)} to proceed.",
                available_balance=balance.available_balance,
                required_amount=self.booking_fee,
            )
        return balance

    async def _check_availability(self, request: CreateBookingWithDepositRequest) -> RoomAvailabilityCheck:
        logger.info(
            "Performing final availability check...",
            extra={"hostel_id": request.hostel_id, "room_id": request.room_id},
        )
        check = await self.availability_service.perform_final_availability_check(
            request.hostel_id,
            request.room_id,
            request.check_in_date,
            request.check_out_date,
        )
        if not check.available:
            raise RoomUnavailableError(
                ROOM_UNAVAILABLE_MESSAGES.get(check.verdict, ROOM_UNAVAILABLE_MESSAGES[AvailabilityVerdict.UNAVAILABLE]),
                verdict=check.verdict,
                room_id=request.room_id,
            )
        logger.info(
            "Room availability confirmed. Proceeding with booking...",
            extra={"room_id": request.room_id, "checked_at": check.checked_at.isoformat()},
        )
        return check

    async def _run(self, request: CreateBookingWithDepositRequest) -> BookingRecord:
        stage = ReservationStage.BALANCE_CHECK
        try:
            await self._check_balance()

            stage = ReservationStage.AVAILABILITY_CHECK
            await self._check_availability(request)

            stage = ReservationStage.SUBMISSION
            booking = await self.booking_service.create_booking_with_deposit(request, self.booking_fee)
        except Exception as e:
            logger.error(
                f"Booking creation failed at {stage.value}: {e}",
                extra={"stage": stage.value, "room_id": request.room_id, "hostel_id": request.hostel_id},
            )
            raise

        logger.info(
            f"Reservation {ReservationStage.COMPLETED.value}: booking {booking.id}",
            extra={"stage": ReservationStage.COMPLETED.value, "booking_id": booking.id},
        )
        return booking

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    @track_performance("reserve_room")
    async def reserve(
        self,
        request: CreateBookingWithDepositRequest,
        timeout: Optional[float] = None,
    ) -> BookingRecord:
        """
        Run one reservation attempt.

        Raises a ReservationError subclass when the attempt is aborted,
        RequestTimeoutError when it exceeds ``timeout`` (defaults to
        RESERVATION_TIMEOUT_SECONDS), and transport errors unchanged.
        """
        if self._in_progress:
            raise ReservationInProgressError()

        deadline = self.config.RESERVATION_TIMEOUT_SECONDS if timeout is None else timeout
        self._in_progress = True
        try:
            return await asyncio.wait_for(self._run(request), timeout=deadline)
        except asyncio.TimeoutError as e:
            raise RequestTimeoutError(
                "Booking took too long to complete. Please check your bookings before trying again.",
                timeout_seconds=deadline,
            ) from e
        finally:
            self._in_progress = False
