"""
Create Emission Record Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.repositories.exceptions import DuplicateEntryError
from src.app.services.access_policy import resolve_record_scope
from src.app.services.record_uniqueness import DUPLICATE_PERIOD_ENTRY, check_period_available
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import EmissionRecord

from .dtos import EmissionRecordCommand, EmissionRecordResponse
from .record_rules import check_write_target, validate_values

logger = logging.getLogger(__name__)


class CreateEmissionRecordUseCase:
    """
    Use case for recording a month of emissions.

    Business Rules:
    - Month is 1-12 and quantity is not negative
    - Factory must be inside the caller's record scope (operators: their factory)
    - Source must be global or the organization's own, and active
    - One record per (organization, factory, source, year, month)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, command: EmissionRecordCommand
    ) -> Result[EmissionRecordResponse]:
        """
        Errors:
            - INVALID_MONTH / INVALID_YEAR / INVALID_QUANTITY
            - FACTORY_NOT_FOUND / SOURCE_NOT_FOUND / SOURCE_INACTIVE
            - INSUFFICIENT_ROLE: Factory outside the caller's scope
            - DUPLICATE_PERIOD_ENTRY: Period already recorded
        """
        validation_error = validate_values(command)
        if validation_error:
            return Return.err(validation_error)

        async with self.uow:
            scope = await resolve_record_scope(self.uow, context)
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
            )
            if duplicate_error:
                return Return.err(duplicate_error)

            record = EmissionRecord(
                organization_id=context.organization_id,
                factory_id=command.factory_id,
                emission_source_id=command.emission_source_id,
                user_id=context.user_id,
                year=command.year,
                month=command.month,
                quantity=command.quantity,
            )
            try:
                await self.uow.emission_records.create(record)
            except DuplicateEntryError:
                logger.warning(
                    f"Concurrent write on period {command.year}-{command.month:02d} "
                    f"for factory {command.factory_id}"
                )
                return Return.err(DUPLICATE_PERIOD_ENTRY)

            await self.uow.commit()

            saved = await self.uow.emission_records.get_with_factor(record.id)
            if saved is None:
                return Return.err(Error("RECORD_NOT_FOUND", "Emission record not found"))
            return Return.ok(EmissionRecordResponse.from_read_model(saved))
