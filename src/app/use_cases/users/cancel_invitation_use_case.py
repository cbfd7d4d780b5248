from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import InvitationStatus, UserRole

from .dtos import InvitationResponse


class CancelInvitationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, invitation_id: UUID
    ) -> Result[InvitationResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.organization_id != context.organization_id:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            invitation.status = InvitationStatus.cancelled
            await self.uow.invitations.update(invitation)
            await self.uow.commit()

            return Return.ok(InvitationResponse.from_entity(invitation))
