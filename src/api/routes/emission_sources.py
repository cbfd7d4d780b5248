from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.emission_sources import (
    CreateEmissionSourceUseCase,
    DeleteEmissionSourceUseCase,
    EmissionSourceCommand,
    EmissionSourceListResponse,
    EmissionSourceResponse,
    ListEmissionSourcesUseCase,
    RequestCustomSourceCommand,
    RequestCustomSourceUseCase,
    UpdateEmissionSourceUseCase,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/emission-sources", tags=["Emission Sources"])


class EmissionSourceRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = Field(None, max_length=255)
    period: Optional[str] = Field(None, max_length=50)
    scope: str = Field(..., min_length=1, max_length=50)
    unit: str = Field(..., min_length=1, max_length=50)
    emission_factor: Decimal
    formula: Optional[str] = Field(None, max_length=255)
    is_active: bool = True


class CustomSourceRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = Field(None, max_length=255)
    period: Optional[str] = Field(None, max_length=50)
    scope: str = Field(..., min_length=1, max_length=50)
    unit: str = Field(..., min_length=1, max_length=50)


@router.get("", response_model=EmissionSourceListResponse)
async def list_emission_sources(
    active_only: bool = False,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Global catalog plus the organization's own sources, active first"""
    result = await ListEmissionSourcesUseCase(uow).execute(context, active_only=active_only)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmissionSourceResponse)
async def create_emission_source(
    request: EmissionSourceRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    command = EmissionSourceCommand(**request.model_dump())
    result = await CreateEmissionSourceUseCase(uow).execute(context, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/requests", status_code=status.HTTP_201_CREATED, response_model=EmissionSourceResponse
)
async def request_custom_source(
    request: CustomSourceRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Ask the platform to add a source; it stays inactive until reviewed"""
    command = RequestCustomSourceCommand(**request.model_dump())
    result = await RequestCustomSourceUseCase(uow).execute(context, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{source_id}", response_model=EmissionSourceResponse)
async def update_emission_source(
    source_id: UUID,
    request: EmissionSourceRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Emission Source

    Raises:
        - 404 Not Found: SOURCE_NOT_FOUND (also for global sources)
    """
    command = EmissionSourceCommand(**request.model_dump())
    result = await UpdateEmissionSourceUseCase(uow).execute(context, source_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{source_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_emission_source(
    source_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Emission Source

    Raises:
        - 404 Not Found: SOURCE_NOT_FOUND (also for global sources)
        - 409 Conflict: SOURCE_HAS_RECORDS
    """
    result = await DeleteEmissionSourceUseCase(uow).execute(context, source_id)
    if result.is_err():
        raise_for_error(result.error)
