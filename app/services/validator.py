"""Field-level business rules for student payloads.

A student payload is checked before every create / update.  Four
independent rules run on every call and their errors are returned together:

1. PEN must not belong to another student.
2. Gender code must exist and be inside its validity window.
3. Data source code must exist and be inside its validity window.
4. Email must not belong to another student.

On create any existing owner of the PEN / email is a conflict.  On update the
owner must be the student being updated; a payload without ``student_id`` is
treated as belonging to nobody and is always flagged.

Lookup failures are not caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Protocol
from uuid import UUID

from app.core.constants import (
    DATA_SOURCE_CODE_EXPIRED,
    DATA_SOURCE_CODE_FIELD,
    DATA_SOURCE_CODE_NOT_EFFECTIVE,
    EMAIL_ALREADY_ASSOCIATED,
    EMAIL_FIELD,
    GENDER_CODE_EXPIRED,
    GENDER_CODE_FIELD,
    GENDER_CODE_NOT_EFFECTIVE,
    INVALID_DATA_SOURCE_CODE,
    INVALID_GENDER_CODE,
    INVALID_PAYLOAD_MESSAGE,
    PEN_ALREADY_ASSOCIATED,
    PEN_FIELD,
)
from app.core.exceptions import InvalidPayloadException
from app.models.codes import CodeTableEntry, DataSourceCode, GenderCode
from app.models.enums import CodeValidity
from app.models.errors import ApiError, FieldError
from app.models.student import Student, StudentPayload

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class StudentLookup(Protocol):
    def find_student_by_pen(self, pen: str) -> Student | None: ...

    def find_student_by_email(self, email: str) -> Student | None: ...


class CodeTableLookup(Protocol):
    def find_gender_code(self, code: str) -> GenderCode | None: ...

    def find_data_source_code(self, code: str) -> DataSourceCode | None: ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def check_code_window(entry: CodeTableEntry, as_of: datetime) -> CodeValidity:
    """Classify *as_of* against the entry's effective / expiry window.

    Both bounds are inclusive; an entry without an expiry date never expires.
    """
    now = _as_utc(as_of)
    if now < _as_utc(entry.effective_date):
        return CodeValidity.not_yet_effective
    if entry.expiry_date is not None and now > _as_utc(entry.expiry_date):
        return CodeValidity.expired
    return CodeValidity.valid


def _owned_by_other(
    existing: Student | None,
    student_id: UUID | None,
    is_create_operation: bool,
) -> bool:
    if existing is None:
        return False
    if is_create_operation:
        return True
    return student_id is None or existing.student_id != student_id


class ServicesCardPayloadValidator:
    """Validates student payloads against existing records and code tables.

    Parameters
    ----------
    student_lookup:
        Finds existing students by PEN / email.
    code_table_lookup:
        Finds gender and data source code entries.
    clock:
        Returns the reference instant for code validity windows.
    """

    def __init__(
        self,
        student_lookup: StudentLookup,
        code_table_lookup: CodeTableLookup,
        clock: Clock = utc_now,
    ) -> None:
        self.student_lookup = student_lookup
        self.code_table_lookup = code_table_lookup
        self.clock = clock

    def validate_payload(
        self,
        student: StudentPayload,
        is_create_operation: bool,
    ) -> list[FieldError]:
        """Run every rule and return the field errors in rule order."""
        errors: list[FieldError] = [
            *self.validate_pen(student, is_create_operation),
            *self.validate_gender_code(student),
            *self.validate_data_source_code(student),
            *self.validate_email(student, is_create_operation),
        ]
        if errors:
            logger.info(
                "payload_validation_failed",
                extra={
                    "student_id": str(student.student_id) if student.student_id else None,
                    "is_create_operation": is_create_operation,
                    "error_count": len(errors),
                    "fields": [e.field for e in errors],
                },
            )
        return errors

    def ensure_valid_payload(
        self,
        student: StudentPayload,
        is_create_operation: bool,
    ) -> None:
        """Raise ``InvalidPayloadException`` if any rule fails."""
        errors = self.validate_payload(student, is_create_operation)
        if errors:
            raise InvalidPayloadException(
                ApiError(
                    status=400,
                    message=INVALID_PAYLOAD_MESSAGE,
                    sub_errors=tuple(errors),
                )
            )

    # -----------------------------------------------------------------------
    # Rules
    # -----------------------------------------------------------------------

    def validate_pen(
        self,
        student: StudentPayload,
        is_create_operation: bool,
    ) -> list[FieldError]:
        existing = self.student_lookup.find_student_by_pen(student.pen)
        if _owned_by_other(existing, student.student_id, is_create_operation):
            return [
                FieldError(
                    field=PEN_FIELD,
                    rejected_value=student.pen,
                    message=PEN_ALREADY_ASSOCIATED,
                )
            ]
        return []

    def validate_gender_code(self, student: StudentPayload) -> list[FieldError]:
        entry = self.code_table_lookup.find_gender_code(student.gender_code)
        message = self._code_error(
            entry,
            missing=INVALID_GENDER_CODE,
            not_effective=GENDER_CODE_NOT_EFFECTIVE,
            expired=GENDER_CODE_EXPIRED,
        )
        if message is None:
            return []
        return [
            FieldError(
                field=GENDER_CODE_FIELD,
                rejected_value=student.gender_code,
                message=message,
            )
        ]

    def validate_data_source_code(self, student: StudentPayload) -> list[FieldError]:
        entry = self.code_table_lookup.find_data_source_code(student.data_source_code)
        message = self._code_error(
            entry,
            missing=INVALID_DATA_SOURCE_CODE,
            not_effective=DATA_SOURCE_CODE_NOT_EFFECTIVE,
            expired=DATA_SOURCE_CODE_EXPIRED,
        )
        if message is None:
            return []
        return [
            FieldError(
                field=DATA_SOURCE_CODE_FIELD,
                rejected_value=student.data_source_code,
                message=message,
            )
        ]

    def validate_email(
        self,
        student: StudentPayload,
        is_create_operation: bool,
    ) -> list[FieldError]:
        if student.email is None:
            return []
        existing = self.student_lookup.find_student_by_email(student.email)
        if _owned_by_other(existing, student.student_id, is_create_operation):
            return [
                FieldError(
                    field=EMAIL_FIELD,
                    rejected_value=student.email,
                    message=EMAIL_ALREADY_ASSOCIATED,
                )
            ]
        return []

    def _code_error(
        self,
        entry: CodeTableEntry | None,
        *,
        missing: str,
        not_effective: str,
        expired: str,
    ) -> str | None:
        """Return the message for a failed code check, or ``None`` if valid."""
        if entry is None:
            return missing
        validity = check_code_window(entry, self.clock())
        if validity is CodeValidity.not_yet_effective:
            return not_effective
        if validity is CodeValidity.expired:
            return expired
        return None
