import bcrypt

from libs.result import Error, Result, Return
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import UpdateProfileCommand, UserResponse


class UpdateProfileUseCase:
    """The caller edits their own names, email, phone and optionally password"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: RequestContext, command: UpdateProfileCommand
    ) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(context.user_id)
            if user is None or user.organization_id != context.organization_id:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            other = await self.uow.users.get_by_email(command.email)
            if other is not None and other.id != user.id:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email is already taken by another user")
                )

            user.first_name = command.first_name
            user.last_name = command.last_name
            user.email = command.email
            user.phone = command.phone
            if command.password:
                password_hash = bcrypt.hashpw(command.password.encode(), bcrypt.gensalt(12))
                user.password_hash = password_hash.decode()

            await self.uow.users.update(user)
            await self.uow.commit()

            return Return.ok(UserResponse.from_entity(user))
