from uuid import UUID

from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import GoalResponse
from .goal_rules import GOAL_NOT_FOUND, can_access_goal


class GetGoalUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, goal_id: UUID) -> Result[GoalResponse]:
        async with self.uow:
            goal = await self.uow.goals.get_by_id(goal_id)
            if goal is None or not can_access_goal(goal, context):
                return Return.err(GOAL_NOT_FOUND)

            source = await self.uow.emission_sources.get_by_id(goal.emission_source_id)
            return Return.ok(GoalResponse.from_entity(goal, source.name if source else None))
