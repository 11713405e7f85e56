"""Pydantic models for the reference code tables.

Each entry is valid from ``effective_date`` up to and including
``expiry_date``; a NULL expiry date means the code never expires.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CodeTableEntry(BaseModel):
    """Common columns of the ``gender_code`` and ``data_source_code`` tables."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    code: str
    label: str | None = None
    description: str | None = None
    display_order: int = 0
    effective_date: datetime
    expiry_date: datetime | None = None


class GenderCode(CodeTableEntry):
    """Row of the ``gender_code`` table."""


class DataSourceCode(CodeTableEntry):
    """Row of the ``data_source_code`` table."""
