import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

logger = logging.getLogger(__name__)


class DeleteFactoryUseCase:
    """
    Use case for deleting a factory.

    Business Rules:
    - Only administrators can delete factories
    - A factory with emission records cannot be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, factory_id: UUID) -> Result[None]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            factory = await self.uow.factories.get_by_id(factory_id)
            if factory is None or factory.organization_id != context.organization_id:
                return Return.err(Error("FACTORY_NOT_FOUND", "Factory not found"))

            if await self.uow.emission_records.exists_for_factory(factory.id):
                return Return.err(
                    Error(
                        "FACTORY_HAS_RECORDS",
                        "Cannot delete a factory that has emission records",
                    )
                )

            await self.uow.factories.delete(factory)
            await self.uow.commit()

            logger.info(f"Factory {factory.code} deleted from organization {context.organization_id}")
            return Return.ok(None)
