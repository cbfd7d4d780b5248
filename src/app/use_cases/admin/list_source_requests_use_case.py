from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.emission_sources.dtos import EmissionSourceResponse

from .dtos import PendingSourceRequestsResponse


class ListSourceRequestsUseCase:
    """Custom source requests of every organization awaiting review"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PendingSourceRequestsResponse]:
        async with self.uow:
            sources = await self.uow.emission_sources.list_pending_requests()
            return Return.ok(
                PendingSourceRequestsResponse(
                    sources=[EmissionSourceResponse.from_entity(s) for s in sources]
                )
            )
