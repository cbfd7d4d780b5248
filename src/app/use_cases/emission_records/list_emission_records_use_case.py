"""
List Emission Records Use Case
"""

from libs.result import Result, Return
from src.app.repositories.read_models import RecordFilters
from src.app.services.access_policy import resolve_record_scope
from src.app.services.emission_aggregator import EmissionSummaryView, aggregate_emissions
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import EmissionRecordListResponse, EmissionRecordResponse


class ListEmissionRecordsUseCase:
    """
    Records visible to the caller, newest period first, with summary totals.

    Filters narrow the caller's scope; they never widen it.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, filters: RecordFilters = None
    ) -> Result[EmissionRecordListResponse]:
        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
            records = await self.uow.emission_records.list_with_factor(scope, filters)

            summary = aggregate_emissions(records)
            return Return.ok(
                EmissionRecordListResponse(
                    records=[EmissionRecordResponse.from_read_model(r) for r in records],
                    summary=EmissionSummaryView.from_summary(summary),
                )
            )
