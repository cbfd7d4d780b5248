from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import EmissionSource, UserRole

from .dtos import EmissionSourceCommand, EmissionSourceResponse


class CreateEmissionSourceUseCase:
    """
    Use case for adding an organization-specific emission source.

    Business Rules:
    - Administrators and sustainability officers manage sources
    - Emission factor must not be negative
    - The source belongs to the caller's organization and is not a request
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, command: EmissionSourceCommand
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
            source = EmissionSource(
                organization_id=context.organization_id,
                name=command.name,
                description=command.description,
                period=command.period,
                scope=command.scope,
                unit=command.unit,
                emission_factor=command.emission_factor,
                formula=command.formula,
                is_active=command.is_active,
                is_requested=False,
            )
            await self.uow.emission_sources.create(source)
            await self.uow.commit()

            return Return.ok(EmissionSourceResponse.from_entity(source))
