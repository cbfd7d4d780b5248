import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.exceptions import DuplicateEntryError
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

from .create_factory_use_case import FACTORY_CODE_EXISTS
from .dtos import FactoryCommand, FactoryResponse

logger = logging.getLogger(__name__)


class UpdateFactoryUseCase:
    """
    Use case for editing a factory.

    Business Rules:
    - Only administrators can edit factories
    - Factories of other organizations are reported as not found
    - Code stays unique; the factory may keep its own code
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, factory_id: UUID, command: FactoryCommand
    ) -> Result[FactoryResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            factory = await self.uow.factories.get_by_id(factory_id)
            if factory is None or factory.organization_id != context.organization_id:
                return Return.err(Error("FACTORY_NOT_FOUND", "Factory not found"))

            duplicate = await self.uow.factories.get_by_code(command.code, exclude_id=factory.id)
            if duplicate is not None:
                return Return.err(FACTORY_CODE_EXISTS)

            factory.code = command.code
            factory.name = command.name
            factory.location = command.location or ""
            try:
                await self.uow.factories.update(factory)
            except DuplicateEntryError:
                logger.warning(f"Concurrent update to factory code {command.code}")
                return Return.err(FACTORY_CODE_EXISTS)
            await self.uow.commit()

            return Return.ok(FactoryResponse.from_entity(factory))
