"""Application exceptions.

``InvalidPayloadException`` is raised at the service boundary once all field
errors for a payload have been collected; ``EntityNotFoundError`` is raised
when a student lookup by identifier finds nothing.  Both are rendered into an
``ApiError`` response body by the handlers registered in ``app.main``.
"""

from __future__ import annotations

from typing import Any

from app.models.errors import ApiError


class InvalidPayloadException(Exception):
    """Raised when a payload fails one or more field-level rules."""

    def __init__(self, error: ApiError) -> None:
        super().__init__(error.message)
        self._error = error

    @property
    def error(self) -> ApiError:
        """The structured error, including every field error found."""
        return self._error


class EntityNotFoundError(Exception):
    """Raised when an entity cannot be found by its key."""

    def __init__(self, entity: str, **keys: Any) -> None:
        self.entity = entity
        self.keys = keys
        params = ", ".join(f"{name}={value}" for name, value in keys.items())
        super().__init__(f"{entity} was not found for parameters {{{params}}}")
