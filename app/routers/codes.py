"""Code table listing endpoints."""

from fastapi import APIRouter, Depends

from app.models.codes import DataSourceCode, GenderCode
from app.routers.deps import get_code_table_service
from app.services.codes import CodeTableService

router = APIRouter()


@router.get("/gender-codes", response_model=list[GenderCode])
async def list_gender_codes(
    codes: CodeTableService = Depends(get_code_table_service),
) -> list[GenderCode]:
    return codes.get_all_gender_codes()


@router.get("/data-source-codes", response_model=list[DataSourceCode])
async def list_data_source_codes(
    codes: CodeTableService = Depends(get_code_table_service),
) -> list[DataSourceCode]:
    return codes.get_all_data_source_codes()
