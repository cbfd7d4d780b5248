"""
Send Invitation Use Case

Invites a person to join the caller's organization with a role.
"""

import logging
import secrets
from datetime import timedelta

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.entitlement_service import EntitlementService
from src.app.services.notification_service import NotificationService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Invitation, UserRole

from .dtos import InvitationResponse, SendInvitationCommand
from .user_rules import invalid_role, parse_invitable_role

logger = logging.getLogger(__name__)


class SendInvitationUseCase:
    """
    Use case for inviting users to an organization.

    Business Rules:
    - Only administrators can invite
    - Role must be sustainability_officer or factory_operator
    - Factory operators must be bound to a factory of the organization
    - No user with this email may already belong to the organization
    - No pending invitation may exist for this email
    - The active plan must allow another user
    - Token is random hex; invitation expires after INVITATION_EXPIRY_DAYS
    - Notification is best-effort and never fails the invitation
    """

    def __init__(self, uow: UnitOfWork, notifications: NotificationService):
        self.uow = uow
        self.notifications = notifications

    async def execute(
        self, context: RequestContext, command: SendInvitationCommand
    ) -> Result[InvitationResponse]:
        """
        Errors:
            - INSUFFICIENT_ROLE / INVALID_ROLE
            - FACTORY_REQUIRED / FACTORY_NOT_FOUND
            - EMAIL_ALREADY_EXISTS / INVITATION_ALREADY_EXISTS
            - USER_LIMIT_REACHED
        """
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        role = parse_invitable_role(command.role)
        if role is None:
            return Return.err(invalid_role(command.role))

        async with self.uow:
            factory_id = None
            if role == UserRole.factory_operator:
                if command.factory_id is None:
                    return Return.err(
                        Error("FACTORY_REQUIRED", "Factory operators must be assigned a factory")
                    )
                factory = await self.uow.factories.get_by_id(command.factory_id)
                if factory is None or factory.organization_id != context.organization_id:
                    return Return.err(Error("FACTORY_NOT_FOUND", "Factory not found"))
                factory_id = factory.id

            existing_user = await self.uow.users.get_by_email_in_organization(
                command.email, context.organization_id
            )
            if existing_user is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "A user with this email already exists")
                )

            pending = await self.uow.invitations.get_pending_by_organization_and_email(
                context.organization_id, command.email
            )
            if pending is not None:
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_EXISTS",
                        "A pending invitation already exists for this email",
                    )
                )

            if not await EntitlementService(self.uow).can_create_user(context.organization_id):
                return Return.err(
                    Error("USER_LIMIT_REACHED", "Your subscription does not allow more users")
                )

            now = utcnow()
            invitation = Invitation(
                organization_id=context.organization_id,
                role=role,
                factory_id=factory_id,
                email=command.email,
                token=secrets.token_hex(32),
                sent_at=now,
                expires_at=now + timedelta(days=ApplicationConfig.INVITATION_EXPIRY_DAYS),
            )
            await self.uow.invitations.create(invitation)
            organization = await self.uow.organizations.get_by_id(context.organization_id)
            await self.uow.commit()

            await notify_invitation(
                self.notifications, invitation, organization.name if organization else ""
            )
            return Return.ok(InvitationResponse.from_entity(invitation))


async def notify_invitation(
    notifications: NotificationService, invitation: Invitation, organization_name: str
) -> None:
    """Send the invitation; failures are logged, never raised"""
    try:
        await notifications.send_invitation(invitation, organization_name)
    except Exception:
        logger.exception(f"Failed to send invitation {invitation.id} to {invitation.email}")
