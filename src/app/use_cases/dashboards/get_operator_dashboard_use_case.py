from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role, resolve_record_scope
from src.app.services.emission_aggregator import EmissionSummaryView, aggregate_emissions
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.emission_records.dtos import EmissionRecordResponse
from src.app.use_cases.factories.dtos import FactoryResponse
from src.domain.entities import UserRole

from .dtos import OperatorDashboardResponse

LATEST_RECORDS_LIMIT = 3


class GetOperatorDashboardUseCase:
    """Emissions of the factory a factory operator is bound to"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[OperatorDashboardResponse]:
        role_error = check_role(context, UserRole.factory_operator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
            factory = None
            if not scope.is_empty and scope.factory_id is not None:
                factory = await self.uow.factories.get_by_id(scope.factory_id)
            if factory is None:
                return Return.err(
                    Error("NO_FACTORY_ASSIGNED", "No factory assigned to your account")
                )

            records = await self.uow.emission_records.list_with_factor(scope)
            responses = [EmissionRecordResponse.from_read_model(r) for r in records]

            return Return.ok(
                OperatorDashboardResponse(
                    factory=FactoryResponse.from_entity(factory),
                    summary=EmissionSummaryView.from_summary(aggregate_emissions(records)),
                    records=responses,
                    latest_records=responses[:LATEST_RECORDS_LIMIT],
                )
            )
