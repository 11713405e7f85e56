"""Structured error models returned to API clients.

``FieldError`` describes one failed rule for one payload field; ``ApiError``
wraps a list of them with an HTTP status and summary message.  Both are
frozen so an error handed to an exception cannot be altered afterwards.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FieldError(BaseModel):
    """A single validation failure tied to one input field."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    field: str
    rejected_value: Any = None
    message: str


class ApiError(BaseModel):
    """Error body returned for rejected requests."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    status: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    message: str
    debug_message: str | None = None
    sub_errors: tuple[FieldError, ...] = ()
