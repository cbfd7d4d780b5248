import logging

from libs.result import Result, Return
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import EmissionSource, SourceRequestStatus, UserRole

from .dtos import EmissionSourceResponse, RequestCustomSourceCommand

logger = logging.getLogger(__name__)


class RequestCustomSourceUseCase:
    """
    Use case for requesting a custom emission source.

    The request is stored as an inactive organization source with factor 0
    and request_status=pending until a platform admin reviews it.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, command: RequestCustomSourceCommand
    ) -> Result[EmissionSourceResponse]:
        role_error = check_role(
            context, UserRole.administrator, UserRole.sustainability_officer
        )
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            source = EmissionSource(
                organization_id=context.organization_id,
                name=command.name,
                description=command.description,
                period=command.period,
                scope=command.scope,
                unit=command.unit,
                is_active=False,
                is_requested=True,
                request_status=SourceRequestStatus.pending,
                requested_at=utcnow(),
            )
            await self.uow.emission_sources.create(source)
            await self.uow.commit()

            logger.info(
                f"Custom source '{source.name}' requested by organization {context.organization_id}"
            )
            return Return.ok(EmissionSourceResponse.from_entity(source))
