import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for removing a user from the organization.

    Business Rules:
    - Administrators cannot be deleted
    - Users who authored emission records or goals cannot be deleted;
      deactivate them instead
    - The user's invitations are deleted with the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext, user_id: UUID) -> Result[None]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if (
                user is None
                or user.organization_id != context.organization_id
                or user.role == UserRole.administrator
            ):
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if await self.uow.emission_records.exists_for_user(
                user.id
            ) or await self.uow.goals.exists_for_user(user.id):
                return Return.err(
                    Error(
                        "USER_HAS_RECORDS",
                        "Cannot delete a user with existing records; deactivate instead",
                    )
                )

            for invitation in await self.uow.invitations.list_by_user(
                user.id, context.organization_id
            ):
                await self.uow.invitations.delete(invitation)

            await self.uow.users.delete(user)
            await self.uow.commit()

            logger.info(f"User {user.id} deleted from organization {context.organization_id}")
            return Return.ok(None)
