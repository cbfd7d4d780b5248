from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.read_models import RecordFilters, RecordScope
from src.app.services.access_policy import check_role
from src.app.services.emission_aggregator import EmissionSummaryView, aggregate_emissions
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.emission_records.dtos import EmissionRecordResponse
from src.domain.entities import UserRole

from .dtos import OfficerDashboardResponse


class GetOfficerDashboardUseCase:
    """Organization emissions for sustainability officers, optionally one factory"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, factory_id: Optional[UUID] = None
    ) -> Result[OfficerDashboardResponse]:
        role_error = check_role(context, UserRole.sustainability_officer)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            scope = RecordScope.organization_wide(context.organization_id)
            factories = await self.uow.factories.list_in_scope(scope)

            if factory_id is not None and all(f.id != factory_id for f in factories):
                return Return.err(Error("FACTORY_NOT_FOUND", "Factory not found"))

            records = await self.uow.emission_records.list_with_factor(
                scope, RecordFilters(factory_id=factory_id)
            )
            summary = aggregate_emissions(records)

            return Return.ok(
                OfficerDashboardResponse(
                    selected_factory_id=str(factory_id) if factory_id else None,
                    summary=EmissionSummaryView.from_summary(summary),
                    records=[EmissionRecordResponse.from_read_model(r) for r in records],
                    factory_names={str(f.id): f.name for f in factories},
                )
            )
