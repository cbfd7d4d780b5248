from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.factories import (
    CreateFactoryUseCase,
    DeleteFactoryUseCase,
    FactoryCommand,
    FactoryListResponse,
    FactoryResponse,
    ListFactoriesUseCase,
    UpdateFactoryUseCase,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/factories", tags=["Factories"])


class FactoryRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    location: Optional[str] = Field(None, max_length=255)

    def to_command(self) -> FactoryCommand:
        return FactoryCommand(code=self.code, name=self.name, location=self.location)


@router.get("", response_model=FactoryListResponse)
async def list_factories(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Factories visible to the caller with the plan's factory cap"""
    result = await ListFactoriesUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=FactoryResponse)
async def create_factory(
    request: FactoryRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Factory

    Raises:
        - 402 Payment Required: FACTORY_LIMIT_REACHED
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 409 Conflict: FACTORY_CODE_EXISTS
    """
    result = await CreateFactoryUseCase(uow).execute(context, request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{factory_id}", response_model=FactoryResponse)
async def update_factory(
    factory_id: UUID,
    request: FactoryRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateFactoryUseCase(uow).execute(context, factory_id, request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{factory_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_factory(
    factory_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Factory

    Raises:
        - 404 Not Found: FACTORY_NOT_FOUND
        - 409 Conflict: FACTORY_HAS_RECORDS
    """
    result = await DeleteFactoryUseCase(uow).execute(context, factory_id)
    if result.is_err():
        raise_for_error(result.error)
