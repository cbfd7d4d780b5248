from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role, is_source_mutable
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

from .dtos import EmissionSourceCommand, EmissionSourceResponse


class UpdateEmissionSourceUseCase:
    """
    Use case for editing an organization emission source.

    Business Rules:
    - Global sources and sources of other organizations are reported as
      not found
    - Emission factor must not be negative
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, source_id: UUID, command: EmissionSourceCommand
    ) -> Result[EmissionSourceResponse]:
        role_error = check_role(
            context, UserRole.administrator, UserRole.sustainability_officer
        )
        if role_error:
            return Return.err(role_error)

        if command.emission_factor < 0:
            return Return.err(
                Error("INVALID_EMISSION_FACTOR", "Emission factor cannot be negative")
            )

        async with self.uow:
            source = await self.uow.emission_sources.get_by_id(source_id)
            if source is None or not is_source_mutable(source, context.organization_id):
                return Return.err(Error("SOURCE_NOT_FOUND", "Emission source not found"))

            source.name = command.name
            source.description = command.description
            source.period = command.period
            source.scope = command.scope
            source.unit = command.unit
            source.emission_factor = command.emission_factor
            source.formula = command.formula
            source.is_active = command.is_active
            await self.uow.emission_sources.update(source)
            await self.uow.commit()

            return Return.ok(EmissionSourceResponse.from_entity(source))
