"""
Booking pricing and rule checks.

Pure calculations used by the booking screens before anything is sent
to the backend. The backend remains the authority on the final amounts.
"""

import math
from datetime import date as Date, datetime, timezone
from decimal import Decimal
from typing import Iterable, List, Optional, Union

from hostel_booking.schemas.booking import BookingRecord, PaymentRequirement
from hostel_booking.schemas.common.enums import BookingType
from hostel_booking.utils.formatters import format_price

MINIMUM_PAYMENT_RATIO = Decimal("0.5")
DEFAULT_AUTO_CANCEL_DAYS = 7
MAX_DURATION_DAYS = {
    BookingType.WEEKLY: 28,
    BookingType.SEMESTER: 180,
}
MIXED_GENDER = "mixed"

Amount = Union[Decimal, int, float]


def _to_decimal(value: Optional[Amount]) -> Decimal:
    return Decimal("0") if value is None else Decimal(str(value))


def get_duration_in_days(check_in: Date, check_out: Date) -> int:
    return (check_out - check_in).days


def calculate_booking_price(
    price_per_semester: Amount,
    price_per_month: Amount,
    price_per_week: Optional[Amount],
    booking_type: BookingType,
    check_in: Date,
    check_out: Date,
) -> Decimal:
    """
    Price of a stay for the given booking type.

    Monthly stays bill whole 30-day months and weekly stays whole weeks;
    without a weekly rate a week costs a quarter of the monthly rate.
    """
    duration = get_duration_in_days(check_in, check_out)

    if booking_type == BookingType.SEMESTER:
        return _to_decimal(price_per_semester)
    if booking_type == BookingType.MONTHLY:
        months = math.ceil(duration / 30)
        return _to_decimal(price_per_month) * months
    if booking_type == BookingType.WEEKLY:
        weeks = math.ceil(duration / 7)
        if price_per_week:
            return _to_decimal(price_per_week) * weeks
        return _to_decimal(price_per_month) * weeks / 4
    return Decimal("0")


def days_until_auto_cancel(booking: BookingRecord, now: Optional[datetime] = None) -> int:
    if booking.auto_cancel_at is None:
        return DEFAULT_AUTO_CANCEL_DAYS
    now = now or datetime.now(timezone.utc)
    auto_cancel_at = booking.auto_cancel_at
    if auto_cancel_at.tzinfo is None:
        auto_cancel_at = auto_cancel_at.replace(tzinfo=timezone.utc)
    remaining_days = (auto_cancel_at - now).total_seconds() / 86400
    return max(0, math.ceil(remaining_days))


def calculate_payment_requirement(
    booking: BookingRecord,
    currency: str = "GHS",
    now: Optional[datetime] = None,
) -> PaymentRequirement:
    """Half of the booking total must be paid before the auto-cancel date."""
    minimum_required = (booking.total_amount * MINIMUM_PAYMENT_RATIO).quantize(Decimal("0.01"))
    return PaymentRequirement(
        minimum_required=minimum_required,
        meets_requirement=booking.amount_paid >= minimum_required,
        days_until_auto_cancel=days_until_auto_cancel(booking, now),
        requirement_description=(
            f"At least 50% ({format_price(minimum_required, currency)}) of the semester fee must be "
            f"paid within {DEFAULT_AUTO_CANCEL_DAYS} days to avoid automatic cancellation"
        ),
    )


def validate_booking_dates(check_in: Date, check_out: Date, today: Optional[Date] = None) -> Optional[str]:
    """
    First problem with the requested stay dates, or None when they are valid.
    """
    today = today or Date.today()

    if check_in < today:
        return "Check-in date cannot be in the past"

    if check_out <= check_in:
        return "Check-out date must be after check-in date"

    try:
        one_year_from_now = today.replace(year=today.year + 1)
    except ValueError:
        # 29 February
        one_year_from_now = today.replace(year=today.year + 1, day=28)
    if check_in > one_year_from_now:
        return "Check-in date cannot be more than one year in advance"

    return None


def _gender_error(student_gender: Optional[str], allowed_genders: Optional[Iterable[str]]) -> Optional[str]:
    if not student_gender or not allowed_genders:
        return None
    allowed = [gender.lower() for gender in allowed_genders]
    if student_gender.lower() in allowed or MIXED_GENDER in allowed:
        return None
    return f"This room is restricted to {', '.join(allowed)} students only."


def validate_booking_constraints(
    student_gender: Optional[str],
    allowed_genders: Optional[Iterable[str]],
    check_in: Date,
    check_out: Date,
    booking_type: BookingType,
    today: Optional[Date] = None,
) -> List[str]:
    """All rule violations for a prospective booking."""
    errors: List[str] = []

    gender_error = _gender_error(student_gender, allowed_genders)
    if gender_error:
        errors.append(gender_error)

    date_error = validate_booking_dates(check_in, check_out, today)
    if date_error:
        errors.append(date_error)

    duration = get_duration_in_days(check_in, check_out)
    if booking_type == BookingType.WEEKLY and duration > MAX_DURATION_DAYS[BookingType.WEEKLY]:
        errors.append("Weekly bookings cannot exceed 4 weeks")
    if booking_type == BookingType.SEMESTER and duration > MAX_DURATION_DAYS[BookingType.SEMESTER]:
        errors.append("Semester bookings cannot exceed 6 months")

    return errors
