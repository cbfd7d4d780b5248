from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import resolve_record_scope
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork


class DeleteEmissionRecordUseCase:
    """Delete a record inside the caller's scope"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, record_id: UUID) -> Result[None]:
        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
            record = await self.uow.emission_records.get_by_id(record_id)
            if (
                record is None
                or record.organization_id != context.organization_id
                or not scope.allows_factory(record.factory_id)
            ):
                return Return.err(Error("RECORD_NOT_FOUND", "Emission record not found"))

            await self.uow.emission_records.delete(record)
            await self.uow.commit()
            return Return.ok(None)
