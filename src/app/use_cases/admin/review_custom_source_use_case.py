"""
Use Case: Review Custom Source

Platform admin endpoint deciding on an organization's custom emission
source request.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.emission_sources.dtos import EmissionSourceResponse
from src.domain.entities import SourceRequestStatus

from .dtos import ReviewCustomSourceCommand

logger = logging.getLogger(__name__)


class ReviewCustomSourceUseCase:
    """
    Approve or reject a requested emission source.

    Business Logic:
    1. Source must be a request still pending review
    2. Approval sets the emission factor (and formula), activates the source
       and marks it approved
    3. Rejection marks it rejected; the source stays inactive
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, source_id: UUID, command: ReviewCustomSourceCommand
    ) -> Result[EmissionSourceResponse]:
        """
        Errors:
            - SOURCE_NOT_FOUND: No such requested source
            - SOURCE_NOT_PENDING: Request was already reviewed
            - INVALID_EMISSION_FACTOR: Approval without a non-negative factor
        """
        async with self.uow:
            source = await self.uow.emission_sources.get_by_id(source_id)
            if source is None or not source.is_requested:
                return Return.err(Error("SOURCE_NOT_FOUND", "Source request not found"))

            if source.request_status != SourceRequestStatus.pending:
                return Return.err(
                    Error("SOURCE_NOT_PENDING", "Source request has already been reviewed")
                )

            if command.approve:
                if command.emission_factor is None or command.emission_factor < 0:
                    return Return.err(
                        Error(
                            "INVALID_EMISSION_FACTOR",
                            "Approval requires a non-negative emission factor",
                        )
                    )
                source.emission_factor = command.emission_factor
                source.formula = command.formula
                source.is_active = True
                source.request_status = SourceRequestStatus.approved
            else:
                source.is_active = False
                source.request_status = SourceRequestStatus.rejected

            await self.uow.emission_sources.update(source)
            await self.uow.commit()

            logger.info(
                f"Platform admin {source.request_status.value} source request {source.id} "
                f"of organization {source.organization_id}"
            )
            return Return.ok(EmissionSourceResponse.from_entity(source))
