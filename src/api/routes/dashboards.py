from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboards import (
    AdminDashboardResponse,
    GetAdminDashboardUseCase,
    GetOfficerDashboardUseCase,
    GetOperatorDashboardUseCase,
    OfficerDashboardResponse,
    OperatorDashboardResponse,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/dashboards", tags=["Dashboards"])


@router.get("/admin", response_model=AdminDashboardResponse)
async def admin_dashboard(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetAdminDashboardUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/officer", response_model=OfficerDashboardResponse)
async def officer_dashboard(
    factory_id: Optional[UUID] = None,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Organization-wide summary, optionally narrowed to one factory"""
    result = await GetOfficerDashboardUseCase(uow).execute(context, factory_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/operator", response_model=OperatorDashboardResponse)
async def operator_dashboard(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetOperatorDashboardUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
