from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.repositories.read_models import RecordFilters
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.emission_records import (
    CreateEmissionRecordUseCase,
    DeleteEmissionRecordUseCase,
    EmissionRecordCommand,
    EmissionRecordDetailResponse,
    EmissionRecordListResponse,
    EmissionRecordResponse,
    GetEmissionRecordUseCase,
    ListEmissionRecordsUseCase,
    UpdateEmissionRecordUseCase,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/emission-records", tags=["Emission Records"])


class EmissionRecordRequest(BaseModel):
    """
    Emission record HTTP request payload

    Range checks on year/month/quantity happen in the use case so that they
    surface with domain error codes instead of 422.
    """

    factory_id: UUID
    emission_source_id: UUID
    year: int
    month: int
    quantity: Decimal = Field(..., description="Activity quantity in the source's unit")

    def to_command(self) -> EmissionRecordCommand:
        return EmissionRecordCommand(**self.model_dump())


@router.get("", response_model=EmissionRecordListResponse)
async def list_emission_records(
    factory_id: Optional[UUID] = None,
    emission_source_id: Optional[UUID] = None,
    year: Optional[int] = None,
    month: Optional[int] = None,
    scope: Optional[str] = None,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Emission Records

    Records in the caller's scope, newest period first, with totals by scope.
    Factory operators only ever see their assigned factory.
    """
    filters = RecordFilters(
        factory_id=factory_id,
        emission_source_id=emission_source_id,
        year=year,
        month=month,
        scope=scope,
    )
    result = await ListEmissionRecordsUseCase(uow).execute(context, filters)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{record_id}", response_model=EmissionRecordDetailResponse)
async def get_emission_record(
    record_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEmissionRecordUseCase(uow).execute(context, record_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmissionRecordResponse)
async def create_emission_record(
    request: EmissionRecordRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Emission Record

    Raises:
        - 400 Bad Request: INVALID_MONTH, INVALID_YEAR, INVALID_QUANTITY, SOURCE_INACTIVE
        - 403 Forbidden: INSUFFICIENT_ROLE (factory outside the caller's scope)
        - 404 Not Found: FACTORY_NOT_FOUND, SOURCE_NOT_FOUND
        - 409 Conflict: DUPLICATE_PERIOD_ENTRY
    """
    result = await CreateEmissionRecordUseCase(uow).execute(context, request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{record_id}", response_model=EmissionRecordResponse)
async def update_emission_record(
    record_id: UUID,
    request: EmissionRecordRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateEmissionRecordUseCase(uow).execute(
        context, record_id, request.to_command()
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_emission_record(
    record_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteEmissionRecordUseCase(uow).execute(context, record_id)
    if result.is_err():
        raise_for_error(result.error)
