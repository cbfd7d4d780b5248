from uuid import UUID

from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import GoalResponse
from .goal_rules import GOAL_NOT_FOUND, can_access_goal, invalid_status, parse_status


class UpdateGoalStatusUseCase:
    """Move a goal between active, completed and cancelled"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, goal_id: UUID, status: str
    ) -> Result[GoalResponse]:
        new_status = parse_status(status)
        if new_status is None:
            return Return.err(invalid_status(status))

        async with self.uow:
            goal = await self.uow.goals.get_by_id(goal_id)
            if goal is None or not can_access_goal(goal, context):
                return Return.err(GOAL_NOT_FOUND)

            goal.status = new_status
            await self.uow.goals.update(goal)
            await self.uow.commit()

            return Return.ok(GoalResponse.from_entity(goal))
