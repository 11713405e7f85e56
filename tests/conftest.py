"""Shared test fixtures.

Provides Supabase query-chain mocks, in-memory lookup collaborators for the
validator, sample payloads, and a ``test_client`` for FastAPI.
"""

import os
from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any
from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

# Settings() needs these at import time
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

EXISTING_STUDENT_ID = UUID("8e20a9c8-6ff3-12bf-816f-f3b2d4f20000")
OTHER_STUDENT_ID = UUID("8e20a9c8-6ff3-12bf-816f-f3b2d4f20001")
FIXED_NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def chainable_table_mock(data: list[dict[str, Any]] | None = None) -> MagicMock:
    """Return a table mock whose query methods chain and execute() yields *data*."""
    m = MagicMock()
    for method in ("select", "insert", "update", "eq", "limit", "order"):
        getattr(m, method).return_value = m
    m.execute.return_value = MagicMock(data=data if data is not None else [])
    return m


def student_row(
    student_id: UUID = EXISTING_STUDENT_ID,
    pen: str = "123456789",
    email: str | None = "abc@gmail.com",
) -> dict[str, Any]:
    """Return a ``student`` table row as Supabase would."""
    return {
        "student_id": str(student_id),
        "pen": pen,
        "legal_first_name": "Jane",
        "legal_middle_names": None,
        "legal_last_name": "Doe",
        "usual_first_name": None,
        "usual_middle_names": None,
        "usual_last_name": None,
        "dob": "2005-04-12",
        "sex_code": "F",
        "gender_code": "F",
        "data_source_code": "MY_ED",
        "email": email,
        "email_verified": False,
        "deceased_date": None,
        "create_date": "2026-01-01T00:00:00+00:00",
        "update_date": "2026-01-01T00:00:00+00:00",
    }


def code_row(
    code: str,
    effective: str = "2020-01-01T00:00:00+00:00",
    expiry: str | None = "2099-12-31T00:00:00+00:00",
) -> dict[str, Any]:
    """Return a code table row."""
    return {
        "code": code,
        "label": code,
        "description": f"{code} description",
        "display_order": 1,
        "effective_date": effective,
        "expiry_date": expiry,
    }


class FakeStudentLookup:
    """In-memory stand-in for ``StudentService`` lookups."""

    def __init__(self, by_pen: dict | None = None, by_email: dict | None = None) -> None:
        self.by_pen = by_pen or {}
        self.by_email = by_email or {}
        self.calls: list[tuple[str, str]] = []

    def find_student_by_pen(self, pen: str):
        self.calls.append(("pen", pen))
        return self.by_pen.get(pen)

    def find_student_by_email(self, email: str):
        self.calls.append(("email", email))
        return self.by_email.get(email)


class FakeCodeTableLookup:
    """In-memory stand-in for ``CodeTableService`` lookups."""

    def __init__(self, genders: dict | None = None, data_sources: dict | None = None) -> None:
        self.genders = genders or {}
        self.data_sources = data_sources or {}

    def find_gender_code(self, code: str):
        return self.genders.get(code)

    def find_data_source_code(self, code: str):
        return self.data_sources.get(code)


@pytest.fixture()
def payload_data() -> dict[str, Any]:
    """A camelCase request body for a valid new student."""
    return {
        "pen": "123456789",
        "legalFirstName": "Jane",
        "legalLastName": "Doe",
        "dob": "2005-04-12",
        "sexCode": "F",
        "genderCode": "F",
        "dataSourceCode": "MY_ED",
        "email": "abc@gmail.com",
    }


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    mock_client.table.return_value = chainable_table_mock()

    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient; dependency overrides are reset afterwards."""
    from app.main import app

    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
