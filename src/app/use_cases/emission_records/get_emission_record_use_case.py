from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import resolve_record_scope
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import EmissionRecordDetailResponse, EmissionRecordResponse

SIMILAR_RECORDS_LIMIT = 5


class GetEmissionRecordUseCase:
    """One record with its computed emissions and recent records of the same source"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, record_id: UUID
    ) -> Result[EmissionRecordDetailResponse]:
        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
            record = await self.uow.emission_records.get_with_factor(record_id)
            if (
                record is None
                or record.organization_id != context.organization_id
                or not scope.allows_factory(record.factory_id)
            ):
                return Return.err(Error("RECORD_NOT_FOUND", "Emission record not found"))

            similar = await self.uow.emission_records.list_similar(
                scope,
                record.emission_source_id,
                record.record_id,
                SIMILAR_RECORDS_LIMIT,
            )

            return Return.ok(
                EmissionRecordDetailResponse(
                    record=EmissionRecordResponse.from_read_model(record),
                    similar_records=[EmissionRecordResponse.from_read_model(r) for r in similar],
                )
            )
