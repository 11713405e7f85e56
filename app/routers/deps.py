"""FastAPI dependency providers for the student routers.

Tests replace these through ``app.dependency_overrides``.
"""

from fastapi import Depends

from app.services.codes import CodeTableService
from app.services.students import StudentService
from app.services.validator import ServicesCardPayloadValidator


def get_student_service() -> StudentService:
    return StudentService()


def get_code_table_service() -> CodeTableService:
    return CodeTableService()


def get_payload_validator(
    students: StudentService = Depends(get_student_service),
    codes: CodeTableService = Depends(get_code_table_service),
) -> ServicesCardPayloadValidator:
    return ServicesCardPayloadValidator(students, codes)
