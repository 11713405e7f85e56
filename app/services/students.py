"""Student record store backed by the Supabase ``student`` table.

Serves both as the record lookup used by the payload validator
(``find_student_by_pen`` / ``find_student_by_email``) and as the persistence
layer behind the student endpoints.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from supabase import Client

from app.core.constants import STUDENT_TABLE
from app.core.exceptions import EntityNotFoundError
from app.db.supabase import get_supabase
from app.models.student import Student, StudentPayload

logger = logging.getLogger(__name__)


class StudentService:
    """Reads and writes student rows."""

    def __init__(self, client: Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    # -----------------------------------------------------------------------
    # Lookups
    # -----------------------------------------------------------------------

    def _find_one(self, column: str, value: Any) -> Student | None:
        result = (
            self.client.table(STUDENT_TABLE)
            .select("*")
            .eq(column, str(value))
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return Student.model_validate(result.data[0])

    def find_student_by_pen(self, pen: str) -> Student | None:
        """Return the student holding *pen*, or ``None``."""
        return self._find_one("pen", pen)

    def find_student_by_email(self, email: str) -> Student | None:
        """Return the student registered with *email*, or ``None``."""
        return self._find_one("email", email)

    def retrieve_student(self, student_id: UUID) -> Student:
        """Return the student with *student_id*.

        Raises ``EntityNotFoundError`` if no such row exists.
        """
        student = self._find_one("student_id", student_id)
        if student is None:
            raise EntityNotFoundError("Student", student_id=student_id)
        return student

    # -----------------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------------

    def create_student(self, payload: StudentPayload) -> Student:
        """Insert a new student row and return it as stored."""
        now = datetime.now(timezone.utc).isoformat()
        row = payload.model_dump(mode="json", exclude={"student_id"})
        row["create_date"] = now
        row["update_date"] = now

        result = self.client.table(STUDENT_TABLE).insert(row).execute()
        student = Student.model_validate(result.data[0])
        logger.info(
            "student_created",
            extra={"student_id": str(student.student_id)},
        )
        return student

    def update_student(self, student_id: UUID, payload: StudentPayload) -> Student:
        """Overwrite the student row identified by *student_id*.

        Raises ``EntityNotFoundError`` if the update matched no row.
        """
        row = payload.model_dump(mode="json", exclude={"student_id"})
        row["update_date"] = datetime.now(timezone.utc).isoformat()

        result = (
            self.client.table(STUDENT_TABLE)
            .update(row)
            .eq("student_id", str(student_id))
            .execute()
        )
        if not result.data:
            raise EntityNotFoundError("Student", student_id=student_id)

        logger.info("student_updated", extra={"student_id": str(student_id)})
        return Student.model_validate(result.data[0])
