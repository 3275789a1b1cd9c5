"""
Base service class providing common functionality for all API services.
"""

import logging
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hostel_booking.config.settings import Settings, settings as default_settings
from hostel_booking.core.exceptions import InvalidResponseError
from hostel_booking.services.http.api_client import ApiClient

TSchema = TypeVar("TSchema", bound=BaseModel)


class BaseService:
    """
    Base service with common behaviors:
    - Shared API client and settings
    - Per-service logger
    - Validation of response bodies into schemas
    """

    def __init__(self, client: Optional[ApiClient] = None, config: Optional[Settings] = None):
        self.config: Settings = config or default_settings
        self.client: ApiClient = client or ApiClient(config=self.config)
        self._logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    # -------------------------------------------------------------------------
    # Response parsing
    # -------------------------------------------------------------------------

    def _parse(self, schema: Type[TSchema], payload: Any, operation: str) -> TSchema:
        """Validate a response body, raising InvalidResponseError on mismatch."""
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as e:
            self._logger.error(
                f"Unexpected response shape for '{operation}': {e.error_count()} error(s)",
                extra={"operation": operation, "schema": schema.__name__},
            )
            raise InvalidResponseError(
                f"Received an invalid response while trying to {operation}",
                details={"schema": schema.__name__, "errors": e.errors(include_url=False)},
            ) from e

    def _parse_list(self, schema: Type[TSchema], payload: Any, operation: str) -> List[TSchema]:
        if not isinstance(payload, list):
            raise InvalidResponseError(
                f"Expected a list while trying to {operation}",
                details={"schema": schema.__name__, "received": type(payload).__name__},
            )
        return [self._parse(schema, item, operation) for item in payload]
