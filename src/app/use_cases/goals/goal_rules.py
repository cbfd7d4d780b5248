from typing import Optional

from libs.result import Error
from src.app.services.access_policy import is_source_visible
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Goal, GoalStatus

from .dtos import GoalCommand

GOAL_NOT_FOUND = Error("GOAL_NOT_FOUND", "Goal not found")


def can_access_goal(goal: Goal, context: RequestContext) -> bool:
    """Organization-wide for administrators and officers; own goals for operators"""
    if goal.organization_id != context.organization_id:
        return False
    if context.is_factory_operator:
        return goal.user_id == context.user_id
    return True


def parse_status(value: str) -> Optional[GoalStatus]:
    try:
        return GoalStatus(value)
    except ValueError:
        return None


def invalid_status(value: str) -> Error:
    allowed = ", ".join(s.value for s in GoalStatus)
    return Error("INVALID_STATUS", f"Invalid status: {value}. Must be one of: {allowed}")


async def validate_goal(
    uow: UnitOfWork, context: RequestContext, command: GoalCommand
) -> Optional[Error]:
    if command.end_date < command.start_date:
        return Error("INVALID_DATE_RANGE", "End date cannot be before start date")
    if command.target_value < 0:
        return Error("INVALID_TARGET_VALUE", "Target value cannot be negative")
    if command.status is not None and parse_status(command.status) is None:
        return invalid_status(command.status)

    source = await uow.emission_sources.get_by_id(command.emission_source_id)
    if source is None or not is_source_visible(source, context.organization_id):
        return Error("SOURCE_NOT_FOUND", "Emission source not found")
    return None
