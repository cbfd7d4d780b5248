"""
Login Use Case

Authenticates a user and returns an organization-scoped JWT.
"""

import bcrypt

from libs.result import Error, Result, Return
from src.api.utils.jwt import generate_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserStatus

from .dtos import AuthResponse, dashboard_path


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - User must have status=active
    - JWT carries user_id, organization_id and role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            # Always perform a hash check even if user not found
            if user is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

            if not bcrypt.checkpw(password.encode(), user.password_hash.encode()):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

            if user.status != UserStatus.active:
                return Return.err(Error("USER_INACTIVE", "User account is inactive"))

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
