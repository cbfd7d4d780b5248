from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import GoalListResponse, GoalResponse


class ListGoalsUseCase:
    """
    Goals of the organization, latest start date first.

    Factory operators only see the goals they authored.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[GoalListResponse]:
        async with self.uow:
            user_id = context.user_id if context.is_factory_operator else None
            goals = await self.uow.goals.list_by_organization(
                context.organization_id, user_id=user_id
            )
            sources = await self.uow.emission_sources.list_visible(context.organization_id)
            source_names = {s.id: s.name for s in sources}

            return Return.ok(
                GoalListResponse(
                    goals=[
                        GoalResponse.from_entity(g, source_names.get(g.emission_source_id))
                        for g in goals
                    ]
                )
            )
