from libs.result import Result, Return
from src.app.services.access_policy import check_role
from src.app.services.entitlement_service import EntitlementService
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserRole

from .dtos import InvitationResponse, UserListResponse, UserResponse


class ListUsersUseCase:
    """Non-administrator users of the organization with pending invitations"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: RequestContext) -> Result[UserListResponse]:
        role_error = check_role(context, UserRole.administrator)
        if role_error:
            return Return.err(role_error)

        async with self.uow:
            users = await self.uow.users.list_by_organization(
                context.organization_id, exclude_role=UserRole.administrator
            )
            responses = []
            for user in users:
                factory_id = None
                if user.role == UserRole.factory_operator:
                    assignment = await self.uow.invitations.get_factory_assignment(
                        user.id, context.organization_id
                    )
                    factory_id = assignment.factory_id if assignment else None
                responses.append(UserResponse.from_entity(user, factory_id))

            pending = await self.uow.invitations.list_pending_by_organization(
                context.organization_id
            )
            can_create_user = await EntitlementService(self.uow).can_create_user(
                context.organization_id
            )

            return Return.ok(
                UserListResponse(
                    users=responses,
                    pending_invitations=[InvitationResponse.from_entity(i) for i in pending],
                    can_create_user=can_create_user,
                )
            )
