"""
Pytest Configuration and Fixtures

Provides a fake hostel backend served through httpx.MockTransport and
the clients/services wired to it.
"""

from datetime import date, timedelta
from decimal import Decimal

import httpx
import pytest

from hostel_booking.config.settings import Settings
from hostel_booking.core.session import AuthSession
from hostel_booking.schemas.booking import CreateBookingWithDepositRequest, EmergencyContact
from hostel_booking.schemas.common.enums import BookingType
from hostel_booking.services.http.api_client import ApiClient

from tests.factories import HOSTEL_ID, ROOM_ID, STUDENT_ID, FakeBackend


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="testing",
        API_BASE_URL="http://testserver/api",
        BOOKING_FEE=Decimal("70"),
        CURRENCY="GHS",
        RESERVATION_TIMEOUT_SECONDS=5,
    )


@pytest.fixture
def session():
    return AuthSession("test-token")


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def api_client(backend, session, test_settings):
    return ApiClient(session=session, transport=httpx.MockTransport(backend), config=test_settings)


@pytest.fixture
def booking_request():
    check_in = date.today() + timedelta(days=14)
    return CreateBookingWithDepositRequest(
        hostel_id=HOSTEL_ID,
        room_id=ROOM_ID,
        student_id=STUDENT_ID,
        student_name="Ama Mensah",
        student_email="ama.mensah@example.com",
        student_phone="+233201234567",
        check_in_date=check_in,
        check_out_date=check_in + timedelta(days=120),
        booking_type=BookingType.SEMESTER,
        emergency_contacts=[
            EmergencyContact(name="Kofi Mensah", relationship="Father", phone="+233 24 765 4321"),
        ],
        use_deposit_balance=True,
        deposit_amount=Decimal("70"),
    )
