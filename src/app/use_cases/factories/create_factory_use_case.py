"""
Create Factory Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.repositories.exceptions import DuplicateEntryError
from src.app.services.access_policy import check_role
from src.app.services.entitlement_service import EntitlementService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Factory, UserRole

from .dtos import FactoryCommand, FactoryResponse

logger = logging.getLogger(__name__)

FACTORY_CODE_EXISTS = Error("FACTORY_CODE_EXISTS", "A factory with this code already exists")


class CreateFactoryUseCase:
    """
    Use case for creating a factory.

    Business Rules:
    - Only administrators can create factories
    - The active plan must allow another factory
    - Factory code is unique across all organizations
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, command: FactoryCommand
    ) -> Result[FactoryResponse]:
        """
        Errors:
            - INSUFFICIENT_ROLE: Caller is not an administrator
            - FACTORY_LIMIT_REACHED: Plan cap reached or no active subscription
            - FACTORY_CODE_EXISTS: Code already taken
        """
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            if not await EntitlementService(self.uow).can_create_factory(
                context.organization_id
            ):
                return Return.err(
                    Error(
                        "FACTORY_LIMIT_REACHED",
                        "Your subscription does not allow more factories",
                    )
                )

            if await self.uow.factories.get_by_code(command.code) is not None:
                return Return.err(FACTORY_CODE_EXISTS)

            factory = Factory(
                organization_id=context.organization_id,
                code=command.code,
                name=command.name,
                location=command.location or "",
            )
            try:
                await self.uow.factories.create(factory)
            except DuplicateEntryError:
                logger.warning(f"Concurrent create of factory code {command.code}")
                return Return.err(FACTORY_CODE_EXISTS)
            await self.uow.commit()

            logger.info(f"Factory {factory.code} created in organization {context.organization_id}")
            return Return.ok(FactoryResponse.from_entity(factory))
