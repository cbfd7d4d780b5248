from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus

from .dtos import InvitationPreviewResponse


class GetInvitationUseCase:
    """Preview of a pending, unexpired invitation looked up by token"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[InvitationPreviewResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if (
                invitation is None
                or invitation.status != InvitationStatus.pending
                or invitation.expires_at <= utcnow()
            ):
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "This invitation is invalid or has expired")
                )

            organization = await self.uow.organizations.get_by_id(invitation.organization_id)
            return Return.ok(
                InvitationPreviewResponse(
                    email=invitation.email,
                    organization_name=organization.name if organization else "",
                    role=invitation.role.value,
                    expires_at=invitation.expires_at,
                )
            )
