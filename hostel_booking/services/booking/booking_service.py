"""
Core booking service: create-with-deposit submission, lookups, and
post-creation changes (update, cancel, extend).
"""

from datetime import date as Date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from hostel_booking.core.exceptions import APIError
from hostel_booking.schemas.booking import (
    ActiveBookingStatus,
    BookingPayment,
    BookingRecord,
    CancelBookingRequest,
    CreateBookingWithDepositRequest,
    ExtendBookingRequest,
    UpdateBookingRequest,
)
from hostel_booking.schemas.common.enums import BookingStatus, PaymentMethod
from hostel_booking.services.base import BaseService
from hostel_booking.services.booking.booking_error_mapper import map_booking_error
from hostel_booking.services.booking.booking_pricing_service import calculate_payment_requirement

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _created_at_key(booking: BookingRecord) -> datetime:
    created_at = booking.created_at
    if created_at is None:
        return _EPOCH
    if created_at.tzinfo is None:
        return created_at.replace(tzinfo=timezone.utc)
    return created_at


class BookingService(BaseService):
    """
    Booking operations for the student portal.

    Responsibilities:
    - Submitting a booking paid from the deposit balance
    - Listing and fetching the student's bookings
    - Update, cancellation and extension requests
    """

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    def _build_create_payload(
        self,
        request: CreateBookingWithDepositRequest,
        booking_fee: Decimal,
    ) -> Dict[str, Any]:
        payload = request.to_payload(exclude_none=True)
        payload["bookingFeeAmount"] = float(booking_fee)
        payload["paymentMethod"] = PaymentMethod.ACCOUNT_CREDIT.value
        return payload

    async def create_booking_with_deposit(
        self,
        request: CreateBookingWithDepositRequest,
        booking_fee: Optional[Decimal] = None,
    ) -> BookingRecord:
        """
        Create a booking, paying the booking fee from account credit.

        The backend deducts the fee and creates the booking. Known
        rejections are raised as the matching ReservationError subclass.
        """
        fee = self.config.BOOKING_FEE if booking_fee is None else booking_fee
        payload = self._build_create_payload(request, fee)

        try:
            response = await self.client.post("/bookings/create-with-deposit", payload)
        except APIError as e:
            mapped = map_booking_error(e)
            if mapped is not e:
                self._logger.warning(
                    f"Booking rejected for room {request.room_id}: {e.message}",
                    extra={
                        "room_id": request.room_id,
                        "hostel_id": request.hostel_id,
                        "error_code": mapped.error_code.value,
                    },
                )
                raise mapped from e
            raise

        booking = self._parse(BookingRecord, response, "create booking")
        self._logger.info(
            f"Booking created successfully: {booking.id}",
            extra={"booking_id": booking.id, "room_id": request.room_id, "status": booking.status.value},
        )
        return booking

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _with_payment_requirements(self, booking: BookingRecord) -> BookingRecord:
        if booking.status not in (BookingStatus.PENDING, BookingStatus.CONFIRMED):
            return booking
        requirement = calculate_payment_requirement(booking, self.config.CURRENCY)
        return booking.model_copy(update={"payment_requirements": requirement})

    async def get_user_bookings(self, student_id: str) -> List[BookingRecord]:
        """Student's bookings, newest first."""
        try:
            payload = await self.client.get(f"/bookings/student/{student_id}")
        except APIError as e:
            raise e.with_prefix("Failed to fetch your bookings") from e

        bookings = [
            self._with_payment_requirements(booking)
            for booking in self._parse_list(BookingRecord, payload, "fetch bookings")
        ]
        return sorted(bookings, key=_created_at_key, reverse=True)

    async def has_active_booking(self, student_id: str) -> ActiveBookingStatus:
        bookings = await self.get_user_bookings(student_id)
        active = next((booking for booking in bookings if booking.is_active), None)
        return ActiveBookingStatus(has_active=active is not None, active_booking=active)

    async def get_booking(self, booking_id: str) -> BookingRecord:
        payload = await self.client.get(f"/bookings/{booking_id}")
        return self._with_payment_requirements(self._parse(BookingRecord, payload, "fetch booking"))

    async def get_booking_payments(self, booking_id: str) -> List[BookingPayment]:
        payload = await self.client.get(f"/bookings/{booking_id}/payments")
        return self._parse_list(BookingPayment, payload, "fetch booking payments")

    async def get_booking_calendar(self, hostel_id: str, month: Optional[str] = None) -> Any:
        params = {"month": month} if month else None
        return await self.client.get(f"/bookings/hostel/{hostel_id}/calendar", params=params)

    # -------------------------------------------------------------------------
    # Changes
    # -------------------------------------------------------------------------

    async def update_booking(self, booking_id: str, request: UpdateBookingRequest) -> BookingRecord:
        payload = await self.client.put(f"/bookings/{booking_id}", request.to_payload(exclude_none=True))
        return self._parse(BookingRecord, payload, "update booking")

    async def cancel_booking(self, booking_id: str, reason: str, notes: Optional[str] = None) -> BookingRecord:
        request = CancelBookingRequest(reason=reason, notes=notes)
        payload = await self.client.patch(f"/bookings/{booking_id}/cancel", request.to_payload(exclude_none=True))
        booking = self._parse(BookingRecord, payload, "cancel booking")
        self._logger.info(
            f"Booking {booking_id} cancelled",
            extra={"booking_id": booking_id, "reason": reason},
        )
        return booking

    async def extend_booking(
        self,
        booking_id: str,
        new_check_out_date: Union[Date, str],
        reason: Optional[str] = None,
    ) -> BookingRecord:
        request = ExtendBookingRequest(new_check_out_date=new_check_out_date, reason=reason)
        payload = await self.client.patch(f"/bookings/{booking_id}/extend", request.to_payload(exclude_none=True))
        return self._parse(BookingRecord, payload, "extend booking")
