"""
Tests for booking price calculation and rule checks.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from hostel_booking.schemas.booking import BookingRecord
from hostel_booking.schemas.common.enums import BookingType
from hostel_booking.services.booking.booking_pricing_service import (
    calculate_booking_price,
    calculate_payment_requirement,
    days_until_auto_cancel,
    get_duration_in_days,
    validate_booking_constraints,
    validate_booking_dates,
)

from tests.factories import booking_payload

TODAY = date(2030, 1, 1)


class TestCalculateBookingPrice:
    def test_semester_is_flat(self):
        price = calculate_booking_price(2400, 600, 150, BookingType.SEMESTER, date(2030, 1, 10), date(2030, 5, 10))

        assert price == Decimal("2400")

    @pytest.mark.parametrize("days, months", [(30, 1), (31, 2), (60, 2), (1, 1)])
    def test_monthly_bills_whole_months(self, days, months):
        check_in = date(2030, 1, 10)

        price = calculate_booking_price(2400, 600, None, BookingType.MONTHLY, check_in, check_in + timedelta(days=days))

        assert price == Decimal("600") * months

    def test_weekly_uses_weekly_rate(self):
        check_in = date(2030, 1, 10)

        price = calculate_booking_price(2400, 600, 150, BookingType.WEEKLY, check_in, check_in + timedelta(days=10))

        assert price == Decimal("300")

    def test_weekly_without_rate_uses_quarter_month(self):
        check_in = date(2030, 1, 10)

        price = calculate_booking_price(2400, 600, None, BookingType.WEEKLY, check_in, check_in + timedelta(days=14))

        assert price == Decimal("300")


class TestPaymentRequirement:
    def test_half_of_total_required(self):
        booking = BookingRecord.model_validate(booking_payload(totalAmount="2401", amountPaid=70))

        requirement = calculate_payment_requirement(booking)

        assert requirement.minimum_required == Decimal("1200.50")
        assert requirement.meets_requirement is False
        assert "GHS 1,200.50" in requirement.requirement_description
        assert requirement.days_until_auto_cancel == 7

    def test_days_until_auto_cancel_rounds_up(self):
        now = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
        booking = BookingRecord.model_validate(booking_payload(autoCancelAt="2030-01-03T13:00:00Z"))

        assert days_until_auto_cancel(booking, now) == 3

    def test_days_until_auto_cancel_never_negative(self):
        now = datetime(2030, 2, 1, tzinfo=timezone.utc)
        booking = BookingRecord.model_validate(booking_payload(autoCancelAt="2030-01-03T13:00:00Z"))

        assert days_until_auto_cancel(booking, now) == 0


class TestValidateBookingDates:
    def test_valid_dates(self):
        assert validate_booking_dates(date(2030, 1, 10), date(2030, 5, 10), today=TODAY) is None

    def test_check_in_in_past(self):
        assert validate_booking_dates(date(2029, 12, 31), date(2030, 5, 10), today=TODAY) == (
            "Check-in date cannot be in the past"
        )

    def test_check_out_not_after_check_in(self):
        assert validate_booking_dates(date(2030, 1, 10), date(2030, 1, 10), today=TODAY) == (
            "Check-out date must be after check-in date"
        )

    def test_more_than_a_year_ahead(self):
        assert validate_booking_dates(date(2031, 1, 2), date(2031, 5, 1), today=TODAY) == (
            "Check-in date cannot be more than one year in advance"
        )

    def test_leap_day_today(self):
        assert validate_booking_dates(date(2029, 2, 28), date(2029, 3, 28), today=date(2028, 2, 29)) is None


class TestValidateBookingConstraints:
    def test_gender_restriction(self):
        errors = validate_booking_constraints(
            "male", ["female"], date(2030, 1, 10), date(2030, 5, 10), BookingType.SEMESTER, today=TODAY
        )

        assert errors == ["This room is restricted to female students only."]

    @pytest.mark.parametrize("allowed", [["Male"], ["mixed"], None, []])
    def test_gender_allowed(self, allowed):
        errors = validate_booking_constraints(
            "male", allowed, date(2030, 1, 10), date(2030, 5, 10), BookingType.SEMESTER, today=TODAY
        )

        assert errors == []

    def test_weekly_limit(self):
        errors = validate_booking_constraints(
            None, None, date(2030, 1, 10), date(2030, 2, 8), BookingType.WEEKLY, today=TODAY
        )

        assert errors == ["Weekly bookings cannot exceed 4 weeks"]

    def test_semester_limit(self):
        errors = validate_booking_constraints(
            None, None, date(2030, 1, 10), date(2030, 7, 10), BookingType.SEMESTER, today=TODAY
        )

        assert errors == ["Semester bookings cannot exceed 6 months"]

    def test_collects_every_violation(self):
        errors = validate_booking_constraints(
            "female", ["male"], date(2029, 12, 1), date(2030, 1, 1), BookingType.WEEKLY, today=TODAY
        )

        assert len(errors) == 3

    def test_duration(self):
        assert get_duration_in_days(date(2030, 1, 1), date(2030, 1, 31)) == 30
