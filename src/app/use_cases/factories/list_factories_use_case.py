from libs.result import Result, Return
from src.app.services.access_policy import resolve_record_scope
from src.app.services.entitlement_service import EntitlementService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import FactoryListResponse, FactoryResponse


class ListFactoriesUseCase:
    """Factories visible to the caller, ordered by name, with the factory cap"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[FactoryListResponse]:
        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
            factories = await self.uow.factories.list_in_scope(scope)
            limits = await EntitlementService(self.uow).get_limits(context.organization_id)

            return Return.ok(
                FactoryListResponse(
                    factories=[FactoryResponse.from_entity(f) for f in factories],
                    can_create_factory=not limits.factory_limit_reached,
                    current_factories=limits.current_factories,
                    max_factories=limits.max_factories,
                )
            )
