from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Goal, GoalStatus

from .dtos import GoalCommand, GoalResponse
from .goal_rules import validate_goal


class CreateGoalUseCase:
    """
    Use case for setting a sustainability goal.

    Business Rules:
    - Goal starts with status=active regardless of the command
    - Source must be global or the organization's own
    - End date must not precede start date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, command: GoalCommand) -> Result[GoalResponse]:
        async with self.uow:
            validation_error = await validate_goal(self.uow, context, command)
            if validation_error:
                return Return.err(validation_error)

            goal = Goal(
                organization_id=context.organization_id,
                user_id=context.user_id,
                emission_source_id=command.emission_source_id,
                title=command.title,
                description=command.description,
                status=GoalStatus.active,
                target_value=command.target_value,
                period=command.period,
                start_date=command.start_date,
                end_date=command.end_date,
            )
            await self.uow.goals.create(goal)
            await self.uow.commit()

            return Return.ok(GoalResponse.from_entity(goal))
