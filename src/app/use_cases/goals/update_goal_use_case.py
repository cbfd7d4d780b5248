from uuid import UUID

from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import GoalCommand, GoalResponse
from .goal_rules import GOAL_NOT_FOUND, can_access_goal, parse_status, validate_goal


class UpdateGoalUseCase:
    """Edit a goal; status is changed only when the command carries one"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, goal_id: UUID, command: GoalCommand
    ) -> Result[GoalResponse]:
        async with self.uow:
            goal = await self.uow.goals.get_by_id(goal_id)
            if goal is None or not can_access_goal(goal, context):
                return Return.err(GOAL_NOT_FOUND)

            validation_error = await validate_goal(self.uow, context, command)
            if validation_error:
                return Return.err(validation_error)

            goal.emission_source_id = command.emission_source_id
            goal.title = command.title
            goal.description = command.description
            goal.target_value = command.target_value
            goal.period = command.period
            goal.start_date = command.start_date
            goal.end_date = command.end_date
            if command.status is not None:
                goal.status = parse_status(command.status)

            await self.uow.goals.update(goal)
            await self.uow.commit()

            return Return.ok(GoalResponse.from_entity(goal))
