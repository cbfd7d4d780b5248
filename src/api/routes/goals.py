from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.goals import (
    CreateGoalUseCase,
    DeleteGoalUseCase,
    GetGoalUseCase,
    GoalCommand,
    GoalListResponse,
    GoalResponse,
    ListGoalsUseCase,
    UpdateGoalStatusUseCase,
    UpdateGoalUseCase,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/goals", tags=["Goals"])


class GoalRequest(BaseModel):
    emission_source_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    target_value: Decimal
    period: Optional[str] = Field(None, max_length=50)
    start_date: date
    end_date: date
    status: Optional[str] = None

    def to_command(self) -> GoalCommand:
        return GoalCommand(**self.model_dump())


class GoalStatusRequest(BaseModel):
    status: str = Field(..., description="active, completed or cancelled")


@router.get("", response_model=GoalListResponse)
async def list_goals(
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListGoalsUseCase(uow).execute(context)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(
    goal_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetGoalUseCase(uow).execute(context, goal_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=GoalResponse)
async def create_goal(
    request: GoalRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Goal

    Raises:
        - 400 Bad Request: INVALID_DATE_RANGE, INVALID_TARGET_VALUE
        - 404 Not Found: SOURCE_NOT_FOUND
    """
    result = await CreateGoalUseCase(uow).execute(context, request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: UUID,
    request: GoalRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateGoalUseCase(uow).execute(context, goal_id, request.to_command())
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{goal_id}/status", response_model=GoalResponse)
async def update_goal_status(
    goal_id: UUID,
    request: GoalStatusRequest,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateGoalStatusUseCase(uow).execute(context, goal_id, request.status)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: UUID,
    context: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteGoalUseCase(uow).execute(context, goal_id)
    if result.is_err():
        raise_for_error(result.error)
