"""Student endpoints.

GET  /{student_id} -- read a student (404 if unknown).
POST ""            -- validate as a create, then insert (201).
PUT  /{student_id} -- validate as an update, then overwrite.

Validation failures raise ``InvalidPayloadException``; the handler in
``app.main`` turns it into a 400 ``ApiError`` body.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from app.models.student import Student, StudentPayload
from app.routers.deps import get_payload_validator, get_student_service
from app.services.students import StudentService
from app.services.validator import ServicesCardPayloadValidator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{student_id}", response_model=Student)
async def read_student(
    student_id: UUID,
    students: StudentService = Depends(get_student_service),
) -> Student:
    """Return the student identified by *student_id*."""
    return students.retrieve_student(student_id)


@router.post("", response_model=Student, status_code=201)
async def create_student(
    payload: StudentPayload,
    students: StudentService = Depends(get_student_service),
    validator: ServicesCardPayloadValidator = Depends(get_payload_validator),
) -> Student:
    """Validate *payload* as a new student and store it."""
    validator.ensure_valid_payload(payload, is_create_operation=True)
    return students.create_student(payload)


@router.put("/{student_id}", response_model=Student)
async def update_student(
    student_id: UUID,
    payload: StudentPayload,
    students: StudentService = Depends(get_student_service),
    validator: ServicesCardPayloadValidator = Depends(get_payload_validator),
) -> Student:
    """Validate *payload* against the existing student and store it.

    The path identifier wins over any ``studentId`` in the body so the
    uniqueness rules compare against the record actually being updated.
    """
    students.retrieve_student(student_id)
    payload = payload.model_copy(update={"student_id": student_id})
    validator.ensure_valid_payload(payload, is_create_operation=False)
    return students.update_student(student_id, payload)
