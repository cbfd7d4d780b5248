from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.api.routes.auth import RegisterRequest
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import RegisterOrganizationResponse
from src.app.use_cases.subscriptions import (
    BillingResponse,
    GetBillingUseCase,
    GetLimitsUseCase,
    LimitsResponse,
    ListPlansUseCase,
    PlanResponse,
    PurchaseSubscriptionUseCase,
    RenewSubscriptionCommand,
    RenewSubscriptionResponse,
    RenewSubscriptionUseCase,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.get("/plans", response_model=List[PlanResponse])
async def list_plans(
    plan_type: Optional[str] = None, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Public plan catalog"""
    result = await ListPlansUseCase(uow).execute(plan_type)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/checkout",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterOrganizationResponse,
)
async def checkout(request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purchase a paid plan for a new organization

    Raises:
        - 400 Bad Request: INVALID_PLAN (plan is not a paid plan)
        - 404 Not Found: PLAN_NOT_FOUND
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    result = await PurchaseSubscriptionUseCase(uow).execute(request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/billing", response_model=BillingResponse)
async def get_billing(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetBillingUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


class RenewRequest(BaseModel):
    subscription_id: UUID
    plan_id: UUID


@router.post("/renew", response_model=RenewSubscriptionResponse)
async def renew(
    request: RenewRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Renew Subscription

    Expires every active subscription of the organization and starts a new,
    invoiced one on the chosen plan.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: PLAN_NOT_FOUND, SUBSCRIPTION_NOT_FOUND
    """
    command = RenewSubscriptionCommand(
        subscription_id=request.subscription_id, plan_id=request.plan_id
    )
    result = await RenewSubscriptionUseCase(uow).execute(context, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/limits", response_model=LimitsResponse)
async def get_limits(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetLimitsUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
