"""
Update User Use Case
"""

import secrets
from datetime import timedelta
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.access_policy import check_role
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Invitation, InvitationStatus, UserRole, UserStatus

from .dtos import UpdateUserCommand, UserResponse
from .user_rules import invalid_role, parse_invitable_role

BINDING_VALIDITY_DAYS = 365


class UpdateUserUseCase:
    """
    Use case for editing a user of the organization.

    Business Rules:
    - Only administrators edit users; administrators themselves are not editable
    - Email stays unique across all users
    - A factory operator given a factory is bound through an invitation row:
      the user's existing invitation is updated, or an accepted one is created
    - Moving a user away from factory_operator clears the factory binding
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, user_id: UUID, command: UpdateUserCommand
    ) -> Result[UserResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        role = parse_invitable_role(command.role)
        if role is None:
            return Return.err(invalid_role(command.role))

        try:
            status = UserStatus(command.status)
        except ValueError:
            return Return.err(Error("INVALID_STATUS", f"Invalid status: {command.status}"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if (
                user is None
                or user.organization_id != context.organization_id
                or user.role == UserRole.administrator
            ):
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            other = await self.uow.users.get_by_email(command.email)
            if other is not None and other.id != user.id:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email is already taken by another user")
                )

            invitations = await self.uow.invitations.list_by_user(
                user.id, context.organization_id
            )
            factory_id = None

            if role == UserRole.factory_operator and command.factory_id is not None:
                factory = await self.uow.factories.get_by_id(command.factory_id)
                if factory is None or factory.organization_id != context.organization_id:
                    return Return.err(Error("FACTORY_NOT_FOUND", "Factory not found"))
                factory_id = factory.id

                if invitations:
                    binding = invitations[0]
                    binding.factory_id = factory_id
                    binding.role = role
                    await self.uow.invitations.update(binding)
                else:
                    now = utcnow()
                    await self.uow.invitations.create(
                        Invitation(
                            organization_id=context.organization_id,
                            role=role,
                            factory_id=factory_id,
                            user_id=user.id,
                            email=command.email,
                            token=secrets.token_hex(32),
                            status=InvitationStatus.accepted,
                            sent_at=now,
                            expires_at=now + timedelta(days=BINDING_VALIDITY_DAYS),
                            accepted_at=now,
                        )
                    )
            elif role != UserRole.factory_operator:
                for invitation in invitations:
                    if invitation.factory_id is not None:
                        invitation.factory_id = None
                        await self.uow.invitations.update(invitation)
            else:
                assignment = await self.uow.invitations.get_factory_assignment(
                    user.id, context.organization_id
                )
                factory_id = assignment.factory_id if assignment else None

            user.first_name = command.first_name
            user.last_name = command.last_name
            user.email = command.email
            user.phone = command.phone
            user.status = status
            user.role = role
            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserResponse.from_entity(user, factory_id))
