import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.exceptions import DuplicateEntryError
from src.app.services.access_policy import resolve_record_scope
from src.app.services.record_uniqueness import DUPLICATE_PERIOD_ENTRY, check_period_available
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow

from .dtos import EmissionRecordCommand, EmissionRecordResponse
from .record_rules import check_write_target, validate_values

logger = logging.getLogger(__name__)


class UpdateEmissionRecordUseCase:
    """
    Use case for editing an emission record.

    Same rules as creation; the record may keep its own period.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, record_id: UUID, command: EmissionRecordCommand
    ) -> Result[EmissionRecordResponse]:
        validation_error = validate_values(command)
        if validation_error:
            return Return.err(validation_error)

        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
            record = await self.uow.emission_records.get_by_id(record_id)
            if (
                record is None
                or record.organization_id != context.organization_id
                or not scope.allows_factory(record.factory_id)
            ):
                return Return.err(Error("RECORD_NOT_FOUND", "Emission record not found"))

            target_error = await check_write_target(self.uow, context, scope, command)
            if target_error:
                return Return.err(target_error)

            duplicate_error = await check_period_available(
                self.uow,
                context.organization_id,
                command.factory_id,
                command.emission_source_id,
                command.year,
                command.month,
                exclude_id=record.id,
            )
            if duplicate_error:
                return Return.err(duplicate_error)

            record.factory_id = command.factory_id
            record.emission_source_id = command.emission_source_id
            record.year = command.year
            record.month = command.month
            record.quantity = command.quantity
            record.updated_at = utcnow()
            try:
                await self.uow.emission_records.update(record)
            except DuplicateEntryError:
                logger.warning(f"Concurrent write on period of record {record.id}")
                return Return.err(DUPLICATE_PERIOD_ENTRY)

            await self.uow.commit()

            saved = await self.uow.emission_records.get_with_factor(record.id)
            if saved is None:
                return Return.err(Error("RECORD_NOT_FOUND", "Emission record not found"))
            return Return.ok(EmissionRecordResponse.from_read_model(saved))
