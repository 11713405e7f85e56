"""Pydantic models for the ``student`` table.

``StudentPayload`` is the body accepted on create / update.  ``student_id``
is only meaningful on update and is compared against existing rows by the
uniqueness rules.  Payload keys are camelCase on the wire; database rows use
the snake_case column names, which are accepted as well.
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StudentPayload(BaseModel):
    """Candidate student record submitted for create or update."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    student_id: UUID | None = None
    pen: str = Field(max_length=9)
    legal_first_name: str | None = Field(default=None, max_length=40)
    legal_middle_names: str | None = Field(default=None, max_length=255)
    legal_last_name: str = Field(max_length=40)
    usual_first_name: str | None = Field(default=None, max_length=40)
    usual_middle_names: str | None = Field(default=None, max_length=255)
    usual_last_name: str | None = Field(default=None, max_length=40)
    dob: date
    sex_code: str | None = Field(default=None, max_length=1)
    gender_code: str = Field(max_length=1)
    data_source_code: str = Field(max_length=10)
    email: str | None = Field(default=None, max_length=80)
    email_verified: bool = False
    deceased_date: date | None = None


class Student(StudentPayload):
    """Full student record returned from the database."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    student_id: UUID
    create_date: datetime | None = None
    update_date: datetime | None = None
