from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role, is_source_mutable
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole


class DeleteEmissionSourceUseCase:
    """
    Use case for deleting an organization emission source.

    Business Rules:
    - Global sources are never deletable
    - A source referenced by emission records cannot be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, source_id: UUID) -> Result[None]:
        role_error = check_role(
            context, UserRole.administrator, UserRole.sustainability_officer
        )
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            source = await self.uow.emission_sources.get_by_id(source_id)
            if source is None or not is_source_mutable(source, context.organization_id):
                return Return.err(Error("SOURCE_NOT_FOUND", "Emission source not found"))

            if await self.uow.emission_records.exists_for_source(source.id):
                return Return.err(
                    Error(
                        "SOURCE_HAS_RECORDS",
                        "Cannot delete an emission source with existing emission records",
                    )
                )

            await self.uow.emission_sources.delete(source)
            await self.uow.commit()
            return Return.ok(None)
