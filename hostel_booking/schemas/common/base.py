"""
Base schema classes with common configuration.

The backend speaks camelCase JSON; schemas use snake_case attributes and
camelCase aliases so that both spellings validate.
"""

from __future__ import annotations

from datetime import date as Date
from decimal import Decimal
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseRequestSchema",
    "BaseResponseSchema",
    "Money",
    "coerce_date",
]

# Decimal amounts go out as JSON numbers, which is what the backend expects
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All wire-facing schemas inherit from this to get consistent aliasing
    and validation behaviour.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # Keep enums as Enum instances to retain full type information;
        # callers can still access `.value` if needed.
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    def to_payload(self, **kwargs: Any) -> Dict[str, Any]:
        """Serialize to the backend's camelCase JSON representation."""
        return self.model_dump(mode="json", by_alias=True, **kwargs)


class BaseRequestSchema(BaseSchema):
    """
    Base schema for request bodies.

    Requests are built once per submission attempt and never mutated.
    """

    model_config = ConfigDict(frozen=True, validate_assignment=False)


class BaseResponseSchema(BaseSchema):
    """Base schema for server-owned records returned by the API."""

    model_config = ConfigDict(validate_assignment=False)


def coerce_date(value: Any) -> Any:
    """Accept ``YYYY-MM-DD`` prefixes of ISO timestamps for date fields."""
    if isinstance(value, str) and len(value) > 10 and value[4] == "-" and value[7] == "-":
        return Date.fromisoformat(value[:10])
    return value
