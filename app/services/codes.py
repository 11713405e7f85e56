"""Reference code table lookups (``gender_code`` and ``data_source_code``)."""

from __future__ import annotations

from typing import TypeVar

from supabase import Client

from app.core.constants import DATA_SOURCE_CODE_TABLE, GENDER_CODE_TABLE
from app.db.supabase import get_supabase
from app.models.codes import CodeTableEntry, DataSourceCode, GenderCode

EntryT = TypeVar("EntryT", bound=CodeTableEntry)


class CodeTableService:
    """Read-only access to the code tables."""

    def __init__(self, client: Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def _find(self, table: str, code: str, model: type[EntryT]) -> EntryT | None:
        result = (
            self.client.table(table)
            .select("*")
            .eq("code", code)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return model.model_validate(result.data[0])

    def _all(self, table: str, model: type[EntryT]) -> list[EntryT]:
        result = (
            self.client.table(table)
            .select("*")
            .order("display_order")
            .execute()
        )
        return [model.model_validate(row) for row in result.data or []]

    def find_gender_code(self, code: str) -> GenderCode | None:
        return self._find(GENDER_CODE_TABLE, code, GenderCode)

    def find_data_source_code(self, code: str) -> DataSourceCode | None:
        return self._find(DATA_SOURCE_CODE_TABLE, code, DataSourceCode)

    def get_all_gender_codes(self) -> list[GenderCode]:
        """Return every gender code ordered by ``display_order``."""
        return self._all(GENDER_CODE_TABLE, GenderCode)

    def get_all_data_source_codes(self) -> list[DataSourceCode]:
        """Return every data source code ordered by ``display_order``."""
        return self._all(DATA_SOURCE_CODE_TABLE, DataSourceCode)
