from hostel_booking.services.http.api_client import (
    ApiClient,
    extract_error_code,
    extract_error_message,
)

__all__ = ["ApiClient", "extract_error_code", "extract_error_message"]
