from datetime import timedelta
from uuid import UUID

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.notification_service import NotificationService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus, UserRole

from .dtos import InvitationResponse
from .send_invitation_use_case import notify_invitation


class ResendInvitationUseCase:
    """
    Use case for resending a pending invitation.

    An expired invitation gets a fresh expiry window and sent_at before it
    is sent again.
    """

    def __init__(self, uow: UnitOfWork, notifications: NotificationService):
        self.uow = uow
        self.notifications = notifications

    async def execute(
        self, context: RequestContext, invitation_id: UUID
    ) -> Result[InvitationResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if (
                invitation is None
                or invitation.organization_id != context.organization_id
                or invitation.status != InvitationStatus.pending
            ):
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            now = utcnow()
            if invitation.expires_at < now:
                invitation.expires_at = now + timedelta(
                    days=ApplicationConfig.INVITATION_EXPIRY_DAYS
                )
                invitation.sent_at = now
                await self.uow.invitations.update(invitation)

            organization = await self.uow.organizations.get_by_id(context.organization_id)
            await self.uow.commit()

            await notify_invitation(
                self.notifications, invitation, organization.name if organization else ""
            )
            return Return.ok(InvitationResponse.from_entity(invitation))
