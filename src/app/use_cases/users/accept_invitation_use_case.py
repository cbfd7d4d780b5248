"""
Accept Invitation Use Case

Completes registration of an invited user.
"""

import logging

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.entitlement_service import EntitlementService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import AuthResponse, dashboard_path
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus, User, UserStatus

from .dtos import AcceptInvitationCommand

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - Invitation must be pending and unexpired
    - The invited email must not belong to any user yet
    - The active plan must still allow another user
    - User gets the invitation's role and status=active
    - Invitation becomes accepted and keeps the user id (factory binding)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AcceptInvitationCommand) -> Result[AuthResponse]:
        """
        Errors:
            - INVITATION_NOT_FOUND: Unknown, used, cancelled or expired token
            - EMAIL_ALREADY_EXISTS: Invited email already registered
            - USER_LIMIT_REACHED: Plan cap reached since the invitation was sent
        """
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(command.token)
            now = utcnow()
            if (
                invitation is None
                or invitation.status != InvitationStatus.pending
                or invitation.expires_at <= now
            ):
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "This invitation is invalid or has expired")
                )

            if await self.uow.users.get_by_email(invitation.email) is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "A user with this email already exists")
                )

            if not await EntitlementService(self.uow).can_create_user(
                invitation.organization_id
            ):
                return Return.err(
                    Error("USER_LIMIT_REACHED", "Your organization has reached its user limit")
                )

            password_hash = bcrypt.hashpw(command.password.encode(), bcrypt.gensalt(12))
            user = User(
                organization_id=invitation.organization_id,
                role=invitation.role,
                status=UserStatus.active,
                first_name=command.first_name,
                last_name=command.last_name,
                email=invitation.email,
                phone=command.phone,
                password_hash=password_hash.decode(),
            )
            await self.uow.users.create(user)

            invitation.status = InvitationStatus.accepted
            invitation.accepted_at = now
            invitation.user_id = user.id
            await self.uow.invitations.update(invitation)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} accepted by user {user.id}")

            access_token = generate_jwt(user.id, user.organization_id, user.role.value)
            return Return.ok(
                AuthResponse(
                    access_token=access_token,
                    user_id=str(user.id),
                    organization_id=str(user.organization_id),
                    role=user.role.value,
                    dashboard_path=dashboard_path(user.role.value),
                )
            )
