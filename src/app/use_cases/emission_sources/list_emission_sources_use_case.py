from libs.result import Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import EmissionSourceListResponse, EmissionSourceResponse


class ListEmissionSourcesUseCase:
    """Global catalog plus the caller's organization sources, active first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, active_only: bool = False
    ) -> Result[EmissionSourceListResponse]:
        async with self.uow:
            sources = await self.uow.emission_sources.list_visible(
                context.organization_id, active_only=active_only
            )
            return Return.ok(
                EmissionSourceListResponse(
                    sources=[EmissionSourceResponse.from_entity(s) for s in sources]
                )
            )
