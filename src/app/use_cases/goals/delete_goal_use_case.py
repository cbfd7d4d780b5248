from uuid import UUID

from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .goal_rules import GOAL_NOT_FOUND, can_access_goal


class DeleteGoalUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, goal_id: UUID) -> Result[None]:
        async with self.uow:
            goal = await self.uow.goals.get_by_id(goal_id)
            if goal is None or not can_access_goal(goal, context):
                return Return.err(GOAL_NOT_FOUND)

            await self.uow.goals.delete(goal)
            await self.uow.commit()
            return Return.ok(None)
